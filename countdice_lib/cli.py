"""
Command-line entry point.

    countdice ImageToProcessPath OutputImagePath [--no-display] [--config PATH]

Options may appear before, between or after the two paths. Paths that start
with "-" go after "--".
"""

import argparse
import logging

from .config import load_config, get_section
from .io import load_image, save_image
from .pipeline import count_dice
from .display import show_result

USAGE = "Usage: countdice ImageToProcessPath OutputImagePath"

logger = logging.getLogger(__name__)


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments to the caller instead of exiting."""

    def error(self, message):
        raise _UsageError(message)

    def exit(self, status=0, message=None):
        # reached after --help; a help request is not a valid invocation
        raise _UsageError(message or "help requested")


def parse_args(argv=None):
    parser = _ArgumentParser(
        description="Count the pips on dice in a photo and save a labeled copy"
    )

    parser.add_argument(
        "input_path",
        help="Image to process (put -- before paths that start with '-')"
    )

    parser.add_argument(
        "output_path",
        help="Where to write the labeled image"
    )

    parser.add_argument(
        "--config",
        default=None,
        help="JSON file overriding the calibration values"
    )

    parser.add_argument(
        "--no-display",
        action="store_true",
        help="Do not open the result window"
    )

    parser.add_argument(
        "--full-polygon-check",
        action="store_true",
        help="Require every point of a pip to be inside its die"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show intermediate images with matplotlib"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Run the dice counter. Returns the process exit status."""
    try:
        args = parse_args(argv)
    except _UsageError:
        print(USAGE)
        return -1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    input_path, output_path = args.input_path, args.output_path

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not load config: {e}")
        return -1

    try:
        img = load_image(input_path)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("Load failed: %s", e)
        print(f"Could not open the image: {input_path}")
        return -1

    full_polygon_check = True if args.full_polygon_check else None
    result = count_dice(img, config=config, debug=args.debug,
                        full_polygon_check=full_polygon_check)
    print(f"Sum {result.total_dots}")

    try:
        save_image(output_path, result.annotated_image)
    except (ValueError, RuntimeError) as e:
        print(f"Could not save the image: {e}")
        return -1

    if not args.no_display:
        display_cfg = get_section(config, "display")
        show_result(
            result.annotated_image,
            window_name=display_cfg["window_name"],
            max_width=display_cfg["max_width"],
            max_height=display_cfg["max_height"],
        )

    return 0
