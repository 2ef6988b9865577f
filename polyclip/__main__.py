import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from polyclip import (
    ClipConfig,
    PolygonError,
    TikzLayer,
    TolerancePolicy,
    area,
    format_polygon,
    generate_tikz_document,
    get_clip_config,
    intersect,
    merge,
    parse_scene,
)

logger = logging.getLogger(__name__)

OPERATIONS = ("intersect", "merge", "area", "all")


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_config(args: argparse.Namespace) -> ClipConfig:
    config = get_clip_config()
    if args.max_vertices is not None:
        config.max_vertices = args.max_vertices
    if args.tolerance is not None:
        config.tolerance = TolerancePolicy.uniform(args.tolerance)
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Intersect and merge two simple polygons")
    parser.add_argument("path", help="Path to the scene file declaring the polygons")
    parser.add_argument(
        "--op",
        choices=OPERATIONS,
        default="all",
        help="Operation to run (default: all)",
    )
    parser.add_argument("--first", help="Name of the first polygon (default: first declared)")
    parser.add_argument("--second", help="Name of the second polygon (default: second declared)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--max-vertices",
        type=int,
        help="Abort a boundary walk that traces more vertices than this (default: 1000)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        help="Comparison epsilon for parallel, containment and closure tests (default: exact)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document with inputs and results to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path) as fin:
        text = fin.read()

    logger.info("Parsing scene from %s", args.path)
    scene = parse_scene(text)
    names = scene.names
    first_name = args.first or (names[0] if names else None)
    second_name = args.second or (names[1] if len(names) > 1 else None)
    if first_name is None or second_name is None:
        logger.error("Scene must declare two polygons, found %d", len(names))
        raise SystemExit(1)

    try:
        config = _build_config(args)
        polygon_a = scene.build(first_name)
        polygon_b = scene.build(second_name)
    except (KeyError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    layers: List[TikzLayer] = [
        TikzLayer(first_name, polygon_a, "first"),
        TikzLayer(second_name, polygon_b, "second"),
    ]

    print(f"{first_name}: {format_polygon(polygon_a)}")
    print(f"{second_name}: {format_polygon(polygon_b)}")

    try:
        if args.op in ("area", "all"):
            print(f"Area {first_name}: {area(polygon_a):.4f}")
            print(f"Area {second_name}: {area(polygon_b):.4f}")

        if args.op in ("intersect", "all"):
            result = intersect(polygon_a, polygon_b, config)
            if result is None:
                print("Intersection: (none)")
            else:
                print(f"Intersection: {format_polygon(result)}")
                print(f"Intersection area: {area(result):.4f}")
                layers.append(TikzLayer("intersection", result, "intersection"))

        if args.op in ("merge", "all"):
            result = merge(polygon_a, polygon_b, config)
            print(f"Merge: {format_polygon(result)}")
            print(f"Merge area: {area(result):.4f}")
            layers.insert(0, TikzLayer("merge", result, "merge"))
    except PolygonError as exc:
        logger.error("Polygon operation failed: %s. Reset both polygons and try again.", exc)
        raise SystemExit(1)

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(generate_tikz_document(layers), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
