"""Example: clip a square with a diamond and render the result to TikZ."""

from pathlib import Path

from polyclip import Polygon, TikzLayer, area, generate_tikz_document, intersect, merge

SQUARE = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
DIAMOND = Polygon([(5, -1), (11, 5), (5, 11), (-1, 5)])


def main() -> None:
    octagon = intersect(SQUARE, DIAMOND)
    star = merge(SQUARE, DIAMOND)
    print(f"Octagon: {len(octagon)} vertices, area {area(octagon):.4f}")
    print(f"Union: {len(star)} vertices, area {area(star):.4f}")

    document = generate_tikz_document(
        [
            TikzLayer("union", star, "merge"),
            TikzLayer("square", SQUARE, "first"),
            TikzLayer("diamond", DIAMOND, "second"),
            TikzLayer("octagon", octagon, "intersection"),
        ]
    )
    out = Path("clip_octagon.tex")
    out.write_text(document, encoding="utf-8")
    print(f"TikZ document written to {out}")


if __name__ == "__main__":
    main()
