"""Incircle of a triangle, built through the typed API."""

from __future__ import annotations

from typing import Optional

from .config import WorkspaceConfig
from .expr import Conic, Line, Numeric, Point, Segment
from .workspace import Workspace


def build_demo(config: Optional[WorkspaceConfig] = None) -> Workspace:
    ws = Workspace.open(config)

    a = ws.add_point((0.0, 0.0), "A", (0.0, 0.0))
    b = ws.add_point((4.0, 0.0), "B", (4.0, 0.0))
    c = ws.add_point((1.0, 3.0), "C", (1.0, 3.0))

    side_ab = ws.add(Segment.between(a, b), "c")
    ws.add(Segment.between(b, c), "a")
    ws.add(Segment.between(c, a), "b")

    incenter = ws.add(
        Point.intersect(Line.angle_bisector(b, a, c), Line.angle_bisector(a, b, c)),
        "I",
    )
    radius = ws.var(Numeric.distance(incenter, side_ab))
    incircle = Conic.circle(incenter, radius)
    incircle.set_color(0, 128, 0)
    circle = ws.add(incircle, "ω")
    ws.add(Point.on(circle), "P")
    return ws


def run() -> None:
    print(build_demo().to_xml())


if __name__ == "__main__":
    run()
