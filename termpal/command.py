"""termpal command line entry point."""

import argparse
import logging
import random
from pathlib import Path
from typing import Any

from .colors import hex_to_rgb
from .config_loader import ConfigLoader
from .constants import CACHE_DIR
from .imageutils import expand_path, pick_image
from .logging_setup import get_logger, init_logger
from .models import Backend, ConfigInvalid, NoImageSelected, TermpalError
from .pipeline import OutputPaths, run_pipeline
from .settings import clamp_overrides
from .templates import terminal_preview

__all__ = ["get_parser", "main"]

# command line option -> settings field
NUMERIC_OPTIONS = {
    "thumb_w": int,
    "thumb_h": int,
    "clamp_s_min": float,
    "clamp_s_max": float,
    "clamp_v_min": float,
    "clamp_v_max": float,
    "skip_s_min": float,
    "skip_s_max": float,
    "skip_v_min": float,
    "skip_v_max": float,
    "bg_idx": int,
    "fg_idx": int,
    "bg_str": int,
    "fg_str": int,
}

OPTION_FIELDS = {
    "thumb_w": "thumb_w",
    "thumb_h": "thumb_h",
    "clamp_s_min": "clamp_saturation_min",
    "clamp_s_max": "clamp_saturation_max",
    "clamp_v_min": "clamp_value_min",
    "clamp_v_max": "clamp_value_max",
    "skip_s_min": "skip_saturation_min",
    "skip_s_max": "skip_saturation_max",
    "skip_v_min": "skip_value_min",
    "skip_v_max": "skip_value_max",
    "bg_idx": "bg_idx",
    "fg_idx": "fg_idx",
    "bg_str": "bg_strength",
    "fg_str": "fg_strength",
}

SWITCH_OPTIONS = ("skip_value", "skip_saturation", "clamp_value", "clamp_saturation")
TOGGLE_FIELDS = (*SWITCH_OPTIONS, "light")

OPTION_HELP = {
    "thumb_w": "set thumb width (min=1)",
    "thumb_h": "set thumb height (min=1)",
    "clamp_s_min": "set min saturation clamp (0.0 - 1.0)",
    "clamp_s_max": "set max saturation clamp (0.0 - 1.0)",
    "clamp_v_min": "set min value clamp (0.0 - 1.0)",
    "clamp_v_max": "set max value clamp (0.0 - 1.0)",
    "skip_s_min": "set min saturation skip (0.0 - 1.0)",
    "skip_s_max": "set max saturation skip (0.0 - 1.0)",
    "skip_v_min": "set min value skip (0.0 - 1.0)",
    "skip_v_max": "set max value skip (0.0 - 1.0)",
    "bg_idx": "palette color to mix with bg (0-7)",
    "fg_idx": "palette color to mix with fg (0-7)",
    "bg_str": "amount of palette color to apply to bg (0-100)",
    "fg_str": "amount of palette color to apply to fg (0-100)",
}


def get_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="termpal", description="Generate a terminal colorscheme from an image", allow_abbrev=False)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", dest="verbose", action="store_true", help="verbose logging")
    verbosity.add_argument("-q", dest="quiet", action="store_true", help="quiet logging")
    parser.add_argument("-i", "--image", metavar="path", help="image/path-with-images to generate colorscheme from")
    parser.add_argument("-l", "--light", action="store_true", help="generate light colorscheme")
    parser.add_argument("-c", "--skip-cache", action="store_true", help="skip cache")
    parser.add_argument("-p", "--preview", action="store_true", help="print the colorscheme to the terminal")
    parser.add_argument("--debug", metavar="filename", help="enable debug mode and log to a file")
    parser.add_argument("--config", metavar="filename", help="use a different configuration file")
    parser.add_argument("--backend", metavar="backend", help='set backend ("kmeans" | "thief")')
    for option, kind in NUMERIC_OPTIONS.items():
        parser.add_argument(f"--{option.replace('_', '-')}", dest=option, type=kind, metavar="value", help=OPTION_HELP[option])
    for toggle in SWITCH_OPTIONS:
        parser.add_argument(f"--{toggle.replace('_', '-')}", dest=toggle, action="store_true", help=toggle.replace("_", " "))
    parser.add_argument("--bg", metavar="#RRGGBB", help="background color")
    parser.add_argument("--fg", metavar="#RRGGBB", help="foreground color")
    return parser


def collect_overrides(args: argparse.Namespace, log: logging.Logger) -> dict[str, Any]:
    """Extract the settings overrides given on the command line.

    Boolean toggles can only enable a feature, invalid colors are ignored.

    Args:
        args: Parsed arguments
        log: Logger
    """
    overrides: dict[str, Any] = {field: getattr(args, option) for option, field in OPTION_FIELDS.items()}
    if args.backend:
        overrides["backend"] = str(Backend.from_name(args.backend))
    for toggle in TOGGLE_FIELDS:
        if getattr(args, toggle):
            overrides[toggle] = True
    for option, field in (("bg", "bg_color"), ("fg", "fg_color")):
        value = getattr(args, option)
        if value is None:
            continue
        try:
            hex_to_rgb(value)
        except ValueError as e:
            log.warning("Ignoring --%s: %s", option, e)
        else:
            overrides[field] = value
    return clamp_overrides(overrides)


def main(argv: list[str] | None = None) -> int:
    """Run the command.

    User facing failures are logged, the exit status is always 0.

    Args:
        argv: Command line arguments, defaults to sys.argv
    """
    args = get_parser().parse_args(argv)

    init_logger(filename=args.debug, force_debug=args.verbose or bool(args.debug), quiet=args.quiet)
    log = get_logger("termpal")

    settings = ConfigLoader(log).load_settings(args.config or "")
    log.info("Reading flags")
    try:
        settings = settings.merged(collect_overrides(args, log), log)
    except ConfigInvalid as e:
        log.error("Invalid settings: %s", e)
        log.info("Exiting...")
        return 0

    try:
        image = pick_image(args.image, random.Random())
    except NoImageSelected as e:
        log.info("%s", e)
        log.info("Exiting...")
        return 0
    if args.image and Path(expand_path(args.image)).is_dir():
        log.info("Chosen image %s", image)

    try:
        scheme = run_pipeline(image, settings, OutputPaths.from_cache_dir(CACHE_DIR), log, skip_cache=args.skip_cache)
    except TermpalError as e:
        log.error("Failed to get colorscheme: %s", e)
        return 0
    except Exception:  # pylint: disable=broad-exception-caught
        log.critical("Unhandled exception:", exc_info=True)
        return 0

    if args.preview:
        print(terminal_preview(scheme))
    return 0


if __name__ == "__main__":
    main()
