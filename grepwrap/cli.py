from __future__ import annotations

import argparse
import io
import logging
import os
import sys

from . import __version__
from .config import Config, load_config
from .paths import PathResolutionError
from .processor import Processor
from .style import Styler, resolve_color, set_color_output

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # -h belongs to --highlight, so help is only available as --help
    parser = argparse.ArgumentParser(
        prog="grep-wrapper",
        description="Normalize and highlight grep-like 'path:row:col: message' lines read from stdin.",
        add_help=False,
    )
    parser.add_argument("-p", "--prefix", type=str, default=None, metavar="PREFIX", help="A string to prefix everything with")
    parser.add_argument("-h", "--highlight", type=str, default=None, metavar="HIGHLIGHT_REGEX", help="The regex for items to highlight")
    parser.add_argument(
        "-c", "--check_exists", "--check-exists",
        dest="check_exists", action="store_true", default=None,
        help="Include only file paths that exist on disk",
    )
    parser.add_argument("--config", type=str, default=None, metavar="PATH", help="YAML file with default option values")
    parser.add_argument("--color", choices=("auto", "always", "never"), default=None, help="When to colorize output (default: auto)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    try:
        cfg: Config = load_config(
            args.config,
            prefix=args.prefix,
            highlight=args.highlight,
            check_exists=args.check_exists,
            color=args.color,
        )
    except (OSError, ValueError) as e:
        # Also covers an unresolvable working directory and YAML syntax errors
        parser.error(str(e))

    # Input is decoded as UTF-8, so write it back the same way
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    color = resolve_color(cfg.color, sys.stdout)
    set_color_output(color)
    processor = Processor(
        config=cfg,
        highlight_pattern=cfg.compile_highlight(),
        styler=Styler(enabled=color),
    )
    logger.debug("running with %r", cfg)

    try:
        processor.process_stream(sys.stdin.buffer, sys.stdout)
    except PathResolutionError as e:
        logger.error("%s", e)
        return 1

    try:
        sys.stdout.flush()
    except BrokenPipeError:
        # Nobody is reading any more; keep the interpreter's final flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
