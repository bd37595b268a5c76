from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .cave import CaveGenerator
from .config import CaveSettings
from .errors import InvalidConfiguration
from .logging_config import configure_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="cavegen",
        description="Generate a connected cave occupancy grid",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a settings YAML file to load/override defaults.",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--fill", dest="fill_percent", type=int, default=None, help="Initial wall percentage (0-100).")
    parser.add_argument("--seed", type=str, default=None)
    parser.add_argument(
        "--random-seed",
        dest="use_random_seed",
        action="store_true",
        default=None,
        help="Derive the seed from the current time.",
    )
    parser.add_argument("--smoothing-mode", choices=("snapshot", "in_place"), default=None)
    parser.add_argument("--print-grid", action="store_true", help="Also print the bordered grid rows.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser.parse_args(argv)


def build_settings(args) -> CaveSettings:
    settings = CaveSettings.load(user_path=args.settings_path).from_env()
    return settings.merged(
        {
            "width": args.width,
            "height": args.height,
            "fill_percent": args.fill_percent,
            "seed": args.seed,
            "use_random_seed": args.use_random_seed,
            "smoothing_mode": args.smoothing_mode,
        }
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING, stream=sys.stderr)

    try:
        settings = build_settings(args)
    except InvalidConfiguration as exc:
        print(exc.to_human(), file=sys.stderr)
        return 2

    result = CaveGenerator(settings).run()
    data = result.summary()
    if args.print_grid:
        data["grid"] = result.bordered.to_rows()
    # Print JSON summary so it can be diffed across runs
    print(json.dumps(data, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
