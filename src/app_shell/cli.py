import argparse
import logging
import sys
from pathlib import Path

from src.components.fluid_scale import (
    TYPE_SCALES,
    BuildSystemInput,
    Viewport,
    parse_int,
    run,
)
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str) -> Rules:
    try:
        return load_rules(Path(path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load rules from {path}: {e}")
        sys.exit(1)


def handle_css(args: argparse.Namespace) -> None:
    rules = get_rules(args.rules)
    inp = BuildSystemInput(
        min_viewport=Viewport(
            width=parse_int(args.min_width),
            font_size=parse_int(args.min_font_size),
            type_scale=args.min_type_scale,
        ),
        max_viewport=Viewport(
            width=parse_int(args.max_width),
            font_size=parse_int(args.max_font_size),
            type_scale=args.max_type_scale,
        ),
    )
    result = run(inp, rules=rules.fluid, selector=rules.css.selector)

    if args.output:
        Path(args.output).write_text(result.css)
        logger.info(f"Wrote {result.declaration_count} declarations to {args.output}")
    else:
        print(result.css)


def handle_scales(args: argparse.Namespace) -> None:
    for name, ratio in TYPE_SCALES.items():
        print(f"{name:<18}{ratio}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fluid Design System CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # css
    css_parser = subparsers.add_parser("css", help="Render the fluid design system stylesheet")
    css_parser.add_argument("min_width", help="Narrowest viewport width (px)")
    css_parser.add_argument("min_font_size", help="Step 0 font size at the narrowest width (px)")
    css_parser.add_argument("min_type_scale", help="Scale name at the narrowest width")
    css_parser.add_argument("max_width", help="Widest viewport width (px)")
    css_parser.add_argument("max_font_size", help="Step 0 font size at the widest width (px)")
    css_parser.add_argument("max_type_scale", help="Scale name at the widest width")
    css_parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    css_parser.add_argument("--output", help="Write CSS to this file instead of stdout")

    # scales
    subparsers.add_parser("scales", help="List available type scales")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command == "css":
        handle_css(args)
    elif args.command == "scales":
        handle_scales(args)


if __name__ == "__main__":
    main()
