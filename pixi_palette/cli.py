import argparse
import logging
import os
import sys

from .color import normalize_hex
from .export import export_json, format_contrast_table, print_feedback, print_palette
from .extract import BACKENDS, extract_palette_from_image
from .feedback import score
from .palette import (
    COLOR_SCHEMES,
    PALETTE_AESTHETICS,
    explore_palette,
    generate_by_aesthetic,
    generate_by_scheme,
    load_palette_from_json,
)
from .random_source import RandomSource


def _add_common_options(parser):
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=5,
        help="Number of colors (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output",
    )
    parser.add_argument(
        "--json",
        metavar="PATH",
        default=None,
        help="Also write the palette to a JSON file",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pixi-palette",
        description="Generate, extract and critique color palettes",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a palette from a scheme or aesthetic")
    _add_common_options(generate)
    mode = generate.add_mutually_exclusive_group()
    mode.add_argument("--scheme", choices=COLOR_SCHEMES, help="Color-wheel scheme (default: random)")
    mode.add_argument("--aesthetic", choices=PALETTE_AESTHETICS, help="Aesthetic preset")
    generate.add_argument(
        "--base",
        metavar="HEX",
        help="Base color anchoring the hue (schemes only)",
    )

    explore = subparsers.add_parser("explore", help="Generate named, tagged palettes to browse")
    _add_common_options(explore)
    explore.add_argument("--aesthetic", choices=PALETTE_AESTHETICS, help="Aesthetic (default: any)")
    explore.add_argument("--batch", type=int, default=1, help="How many palettes to show")

    extract = subparsers.add_parser("extract", help="Extract a palette from an image")
    extract.add_argument("image_path", help="Path to the source image")
    _add_common_options(extract)
    extract.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default="lloyd",
        help="Clustering implementation (default: lloyd)",
    )
    extract.add_argument(
        "--legacy-cap",
        action="store_true",
        help="Keep at most 5 colors from the lightness filter, regardless of --count",
    )

    critique = subparsers.add_parser("score", help="Rate the harmony of a palette")
    critique.add_argument("colors", nargs="*", help="Hex colors")
    critique.add_argument("--from-palette", metavar="JSON", help="Read colors from a palette JSON file")

    contrast = subparsers.add_parser("contrast", help="Show pairwise contrast ratios")
    contrast.add_argument("colors", nargs="+", help="Hex colors")

    return parser


def _maybe_export(args, colors, **metadata):
    if not args.json:
        return
    directory = os.path.dirname(args.json)
    if directory:
        os.makedirs(directory, exist_ok=True)
    export_json(colors, args.json, feedback=score(colors), **metadata)
    print(f"\nExported: {args.json}")


def _run_generate(parser, args):
    rng = RandomSource(args.seed)
    if args.aesthetic:
        if args.base:
            parser.error("--base only applies to --scheme")
        colors = generate_by_aesthetic(args.aesthetic, args.count, rng=rng)
        label = args.aesthetic
    else:
        scheme = args.scheme or "random"
        colors = generate_by_scheme(scheme, args.count, base_color=args.base, rng=rng)
        label = scheme

    print_palette(colors, title=f"{label.title()} palette")
    print_feedback(score(colors))
    _maybe_export(args, colors, aesthetic=label)


def _run_explore(args):
    rng = RandomSource(args.seed)
    entries = [explore_palette(args.aesthetic, args.count, rng=rng) for _ in range(args.batch)]
    for entry in entries:
        print_palette(entry.colors, title=f"{entry.name} ({', '.join(entry.tags)})")
    last = entries[-1]
    _maybe_export(args, last.colors, name=last.name, tags=last.tags, aesthetic=last.aesthetic)


def _run_extract(args):
    print(f"Analyzing: {args.image_path}")
    colors = extract_palette_from_image(
        args.image_path,
        args.count,
        rng=RandomSource(args.seed),
        lightness_cap=5 if args.legacy_cap else None,
        backend=args.backend,
    )
    print_palette(colors, title="Extracted palette")
    print_feedback(score(colors))
    _maybe_export(args, colors, source_file=os.path.basename(args.image_path))


def _run_score(parser, args):
    if args.from_palette:
        if args.colors:
            parser.error("Cannot use both colors and --from-palette")
        colors, _ = load_palette_from_json(args.from_palette)
    else:
        colors = [normalize_hex(c) for c in args.colors]
    print_palette(colors)
    print_feedback(score(colors))


def _run_contrast(args):
    colors = [normalize_hex(c) for c in args.colors]
    print(format_contrast_table(colors))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if getattr(args, "count", 1) < 1:
        parser.error("--count must be at least 1")
    if getattr(args, "batch", 1) < 1:
        parser.error("--batch must be at least 1")

    try:
        if args.command == "generate":
            _run_generate(parser, args)
        elif args.command == "explore":
            _run_explore(args)
        elif args.command == "extract":
            _run_extract(args)
        elif args.command == "score":
            _run_score(parser, args)
        elif args.command == "contrast":
            _run_contrast(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
