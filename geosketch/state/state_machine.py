"""Finite state machine with validated transitions.

The animation sequencer drives its playback phases through this machine so
that a late timer or camera callback can never move playback into a phase
it is not allowed to reach from the current one.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Effect run when an action's transition happens."""

StateGraph = dict[Enum, list["Action"]]
"""Maps each state to the actions allowed from it."""


@dataclass(frozen=True)
class Action:
    """A transition to ``state`` with an optional effect.

    Attributes:
        state: The target state.
        effect: Optional function executed after the transition.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Run the effect, if any, and return its result."""
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that rejects transitions its graph does not list.

    Attributes:
        _state: The current state.
        _allowed: Actions allowed from each state.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Create the machine in ``initial_state``.

        Args:
            initial_state: The starting state.
            nodes_graph: Actions allowed from each state.
        """
        self._state = initial_state
        self._allowed = nodes_graph

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the matching action's effect.

        The state is updated before the effect runs, so an effect that reads
        ``current`` sees the new state.

        Returns:
            The effect's result, or None when the action has no effect.

        Raises:
            ValueError: If the graph does not allow ``current -> next_state``.
        """
        next_action = self._validate_transition(self._state, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        """Find the action that leads from ``frm`` to ``to``.

        Raises:
            ValueError: If no such action exists.
        """
        for action in self._allowed.get(frm, []):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} → {to.name}"
        raise ValueError(msg)
