"""
Trace the navigation cursor around a circle and along a segment, and plot it.

Requires the ``plot`` extra (matplotlib).
"""

import matplotlib.pyplot as plt

from geosketch.elements import CircleElement, ElementType, LineMode, LineSegmentElement
from geosketch.geo import GeoPoint
from geosketch.navigation import Navigator, step_distance_km


def trace_circle(navigator, circle, zoom, steps):
    navigator.start_navigation(ElementType.CIRCLE, circle.id, circle=circle)
    coords = [navigator.circle_coords(circle)]
    for _ in range(steps):
        navigator.navigate_circle_forward(circle, zoom)
        coords.append(navigator.circle_coords(circle))
    return coords


def trace_segment(navigator, segment, zoom, steps):
    navigator.start_navigation(ElementType.LINE_SEGMENT, segment.id, segment=segment)
    progress = [navigator.session.progress]
    for _ in range(steps):
        progress.append(navigator.navigate_segment_forward(segment, zoom))
    return progress


def main():
    print("=" * 80)
    print("GeoSketch - Navigation Trace")
    print("=" * 80)

    zoom = 10
    print(f"\nZoom {zoom}: one step is {step_distance_km(zoom):.1f} km")

    navigator = Navigator()
    circle = CircleElement("lake", GeoPoint.from_deg(46.45, 6.55), radius_km=40)
    segment = LineSegmentElement(
        "route", GeoPoint.from_deg(46.2, 6.1), mode=LineMode.AZIMUTH, distance_km=450, azimuth=35
    )

    circle_coords = trace_circle(navigator, circle, zoom, steps=24)
    print(f"Circle: {len(circle_coords) - 1} steps, final angle {navigator.session.angle_position:.1f} deg")

    progress = trace_segment(navigator, segment, zoom, steps=20)
    print(f"Segment: length {segment.length_km():.1f} km, final progress {progress[-1]:.3f}")
    navigator.exit_navigation()

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    ax1.plot([p.lon for p in circle_coords], [p.lat for p in circle_coords], "o-", markersize=3)
    ax1.plot(circle.center.lon, circle.center.lat, "k+")
    ax1.set_title(f"Circle cursor, radius {circle.radius_km:g} km")
    ax1.set_xlabel("Longitude (deg)")
    ax1.set_ylabel("Latitude (deg)")
    ax1.set_aspect("equal", adjustable="datalim")

    ax2.plot(range(len(progress)), progress, "o-", markersize=3)
    ax2.axhline(1.0, color="grey", linestyle="--", linewidth=0.8)
    ax2.axhline(0.0, color="grey", linestyle="--", linewidth=0.8)
    ax2.set_title("Segment progress (bounces at the ends)")
    ax2.set_xlabel("Step")
    ax2.set_ylabel("Progress")

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
