# src/color_scale_generator/demo.py
import argparse
import json
import logging
import os
import sys

_ROLE_FLAGS = {
    "white": "baseWhite",
    "black": "baseBlack",
    "brand": "brand500",
    "primary": "primary500",
    "secondary": "secondary500",
    "gray": "gray500",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csg-demo",
        description="Generate 50–900 color scales from a seed palette and print them as JSON.",
    )
    for flag, role in _ROLE_FLAGS.items():
        parser.add_argument(
            f"--{flag}",
            dest=role,
            metavar="HEX",
            help=f"{role} as 6 hex digits, '#' optional (default from data/default_seed.json)",
        )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI demo: merge flags over the default seed palette and print the generated scales."""
    from .generation.color.constants import get_default_seed_hex
    from .generation.general.utils.log import DEBUG_TOPICS_ENV, debug, reload_topics
    from .generation.orchestrator import generate_colors

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.debug:
        os.environ.setdefault(DEBUG_TOPICS_ENV, "all")
        reload_topics()

    seed = dict(get_default_seed_hex())
    seed.update({role: getattr(args, role) for role in _ROLE_FLAGS.values() if getattr(args, role)})
    debug(f"seed palette: {seed}", topic="demo")

    try:
        scale = generate_colors(seed)
    except (KeyError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(scale.to_dict(), indent=2))


if __name__ == "__main__":
    main()
