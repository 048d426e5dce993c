"""Command-line interface for revmark.

Reads HTML from a file or standard input and writes Markdown to a file or
standard output. Options come from, in increasing priority: built-in
defaults, a configuration file (discovered automatically or given with
``--config``) and command-line flags.

Examples
--------
Convert a file::

    $ revmark page.html -o page.md

Convert from a pipe with GitHub-flavored output::

    $ curl -s https://example.com | revmark --github-flavored

Keep Hugo shortcodes intact and wrap at 100 columns::

    $ revmark post.html --shortcodes --wrap 100

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence, TextIO, get_args

from revmark import __version__
from revmark.cli_config import discover_config_file, load_config_file, options_from_config
from revmark.constants import BulletSymbol, EmphasisSymbol, HtmlParser, TableHeaderHandling, UnknownTagsOption
from revmark.converter import Converter
from revmark.exceptions import ConversionError, DependencyError, RevmarkError, ValidationError
from revmark.logging_utils import configure_logging
from revmark.options import ConverterOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_CONVERSION_ERROR = 5


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ConversionError):
        return EXIT_CONVERSION_ERROR
    return EXIT_ERROR


def _comma_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``revmark`` command."""
    parser = argparse.ArgumentParser(
        prog="revmark",
        description="Convert HTML to clean, wrapped Markdown.",
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to convert ('-' reads stdin)")
    parser.add_argument("-o", "--out", help="Write Markdown to this file instead of stdout")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the input and output files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    config_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    markdown_group = parser.add_argument_group("markdown output")
    markdown_group.add_argument(
        "--github-flavored",
        action="store_true",
        default=None,
        help="Use fenced code blocks and backslash line breaks",
    )
    markdown_group.add_argument("--bullet", dest="list_bullet_char", choices=get_args(BulletSymbol))
    markdown_group.add_argument("--emphasis", dest="emphasis_char", choices=get_args(EmphasisSymbol))
    markdown_group.add_argument("--horizontal-rule", help="Text emitted for <hr>")
    wrap = markdown_group.add_mutually_exclusive_group()
    wrap.add_argument("--wrap", dest="wrap_line_length", type=int, metavar="N", help="Wrap prose at N columns")
    wrap.add_argument(
        "--no-wrap", dest="wrap_line_length", action="store_const", const=0, help="Disable line wrapping"
    )
    markdown_group.add_argument(
        "--shortcodes", action="store_true", default=None, help="Keep {{< ... >}} shortcodes intact while wrapping"
    )
    markdown_group.add_argument(
        "--table-header",
        dest="table_without_header_row_handling",
        choices=get_args(TableHeaderHandling),
        help="Header strategy for tables without <th> cells",
    )
    markdown_group.add_argument("--default-code-language", dest="default_code_block_language")
    markdown_group.add_argument(
        "--keep-blank-lines",
        dest="remove_multiple_consecutive_blank_lines",
        action="store_false",
        default=None,
        help="Do not collapse consecutive blank lines",
    )

    html_group = parser.add_argument_group("html input")
    html_group.add_argument("--unknown-tags", choices=get_args(UnknownTagsOption), help="Policy for unsupported tags")
    html_group.add_argument(
        "--pass-through-tags", type=_comma_list, metavar="TAGS", help="Comma separated tags emitted as HTML"
    )
    html_group.add_argument(
        "--allow-scheme",
        dest="whitelist_uri_schemes",
        action="append",
        metavar="SCHEME",
        help="Allowed URI scheme for links and images (repeatable)",
    )
    html_group.add_argument("--remove-comments", action="store_true", default=None, help="Drop HTML comments")
    html_group.add_argument("--smart-href", dest="smart_href_handling", action="store_true", default=None)
    html_group.add_argument("--parser", dest="html_parser", choices=get_args(HtmlParser))

    output_group = parser.add_argument_group("terminal output")
    output_group.add_argument(
        "--rich", action="store_true", help="Render the Markdown in the terminal with Rich (requires revmark[rich])"
    )
    output_group.add_argument(
        "--force-rich", action="store_true", help="Use Rich rendering even when stdout is not a TTY"
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps")

    return parser


_OPTION_ARGUMENTS = (
    "github_flavored",
    "list_bullet_char",
    "emphasis_char",
    "horizontal_rule",
    "wrap_line_length",
    "shortcodes",
    "table_without_header_row_handling",
    "default_code_block_language",
    "remove_multiple_consecutive_blank_lines",
    "unknown_tags",
    "pass_through_tags",
    "whitelist_uri_schemes",
    "remove_comments",
    "smart_href_handling",
    "html_parser",
)


def build_options(parsed_args: argparse.Namespace) -> ConverterOptions:
    """Merge configuration file values and command-line flags into options.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file or a flag value is invalid

    """
    options = ConverterOptions()

    if not parsed_args.no_config:
        config_path = parsed_args.config or discover_config_file()
        if config_path is not None:
            options = options_from_config(load_config_file(config_path), options)

    overrides: dict[str, Any] = {}
    for name in _OPTION_ARGUMENTS:
        value = getattr(parsed_args, name)
        if value is not None:
            overrides[name] = value
    if overrides.get("wrap_line_length") == 0:
        overrides["wrap_line_length"] = None

    try:
        return options.create_updated(**overrides)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding=encoding)


def should_use_rich_output(parsed_args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich rendering should be used for stdout.

    Rich rendering is used when ``--rich`` is set, no output file is given,
    and either ``--force-rich`` is set or the stream is a TTY.

    """
    if not parsed_args.rich or parsed_args.out is not None:
        return False
    if parsed_args.force_rich:
        return True
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def _render_rich(markdown: str) -> None:
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError as e:
        raise DependencyError(
            "Rich output requires the optional 'rich' dependency. Install with: pip install revmark[rich]",
            missing_packages=["rich"],
            original_error=e,
        ) from e

    Console(file=sys.stdout).print(Markdown(markdown))


def _write_output(markdown: str, destination: str | None, encoding: str) -> None:
    if destination is None:
        sys.stdout.write(markdown)
        if not markdown.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(destination).write_text(markdown + "\n", encoding=encoding)
    logger.info("Wrote %s", destination)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``revmark`` command.

    Parameters
    ----------
    argv : sequence of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    configure_logging(
        "DEBUG" if parsed_args.trace else parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    try:
        options = build_options(parsed_args)
        html = _read_input(parsed_args.input, parsed_args.encoding)
        markdown = Converter(options).convert(html)
        if should_use_rich_output(parsed_args):
            _render_rich(markdown)
        else:
            _write_output(markdown, parsed_args.out, parsed_args.encoding)
    except (RevmarkError, OSError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
