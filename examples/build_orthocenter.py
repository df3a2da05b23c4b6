"""Example: orthocenter and centroid of a triangle written to a .ggb file."""

import sys

from geogebra_ir import Line, List, Point, Segment, Workspace


def main(path: str = "orthocenter.ggb") -> None:
    ws = Workspace.open()

    a = ws.add_point((0.0, 0.0), "A", (0.0, 0.0))
    b = ws.add_point((5.0, 0.0), "B", (5.0, 0.0))
    c = ws.add_point((1.5, 3.0), "C", (1.5, 3.0))

    ab = ws.add(Line.through(a, b), "c")
    ac = ws.add(Line.through(a, c), "b")
    for start, end, caption in ((a, b, "AB"), (b, c, "BC"), (c, a, "CA")):
        ws.add(Segment.between(start, end), caption)

    ws.add(Point.intersect(Line.perpendicular(ab, c), Line.perpendicular(ac, b)), "H")

    vertices = ws.var(List.from_items([a, b, c]))
    ws.add(Point.from_coords(vertices.mean_x(), vertices.mean_y()), "G")

    print(f"Wrote {ws.save(path)}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
