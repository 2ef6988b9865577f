"""Example pipeline: parse a scene and clip two overlapping squares."""

from polyclip import area, format_polygon, intersect, merge, parse_scene

TEXT = """
# two overlapping squares
polygon A (0, 0) (10, 0) (10, 10) (0, 10)
polygon B (5, 5) (15, 5) (15, 15) (5, 15)
"""


def main() -> None:
    scene = parse_scene(TEXT)
    a = scene.build("A")
    b = scene.build("B")
    common = intersect(a, b)
    union = merge(a, b)
    print("Intersection:", format_polygon(common))
    print(f"Intersection area: {area(common):.4f}")
    print("Merge:", format_polygon(union))
    print(f"Merge area: {area(union):.4f}")


if __name__ == "__main__":
    main()
