"""Command-line interface for the blockrender HTML renderer.

Renders a block-editor JSON document to HTML.

Examples
--------
Render to stdout:
    $ blockrender article.json

Write a standalone dark page with a table of contents:
    $ blockrender article.json --standalone --toc --theme dark -o article.html

Read from stdin:
    $ cat article.json | blockrender -

Use a configuration file:
    $ blockrender article.json --config .blockrender.toml
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from blockrender import __version__
from blockrender.api import load_blocks
from blockrender.config import CONFIG_ENV_VAR, load_config_with_priority, options_from_config
from blockrender.exceptions import BlockRenderError
from blockrender.logging_utils import configure_logging
from blockrender.options.base import COLOR_SCHEMES
from blockrender.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Flags default to None so that only values given on the command line
    override the configuration file.
    """
    parser = argparse.ArgumentParser(
        prog="blockrender",
        description="Render a block-editor JSON document to HTML.",
    )
    parser.add_argument("input", help="Input JSON document, or '-' to read from stdin")
    parser.add_argument("-o", "--out", help="Output file (default: stdout)")
    parser.add_argument(
        "--standalone", action="store_true", default=None, help="Generate a complete HTML page instead of a fragment"
    )
    parser.add_argument("--toc", dest="include_toc", action="store_true", default=None, help="Include a table of contents")
    parser.add_argument("--title", help="Page title for standalone output")
    parser.add_argument("--locale", help="Locale for translated labels (default: en)")
    parser.add_argument(
        "--theme", dest="color_scheme", choices=COLOR_SCHEMES, help="Color scheme for classes and code styles"
    )
    parser.add_argument("--start-heading-index", type=int, help="First heading anchor index (default: 2)")
    parser.add_argument(
        "--no-highlight",
        dest="syntax_highlighting",
        action="store_false",
        default=None,
        help="Disable Pygments syntax highlighting",
    )
    parser.add_argument(
        "--line-numbers", dest="show_line_numbers", action="store_true", default=None, help="Number code lines"
    )
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovery)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


_OPTION_FLAGS = (
    "standalone",
    "include_toc",
    "title",
    "locale",
    "color_scheme",
    "start_heading_index",
    "syntax_highlighting",
    "show_line_numbers",
)


def _collect_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    return {name: getattr(parsed_args, name) for name in _OPTION_FLAGS if getattr(parsed_args, name) is not None}


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        config: Dict[str, Any] = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        config.update(_collect_overrides(parsed_args))
        options = options_from_config(config)
    except BlockRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        text = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        renderer = HtmlRenderer(options)
        html = renderer.render_to_string(load_blocks(text))
        if parsed_args.out:
            renderer.write_text_output(html, parsed_args.out)
            logger.info(f"Wrote {parsed_args.out}")
        else:
            sys.stdout.write(html)
    except BlockRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
