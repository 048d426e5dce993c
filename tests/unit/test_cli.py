#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the revmark command line interface.

Tests cover:
- Argument parsing and option building
- File and stream input/output
- Exit codes for each error category

"""

import argparse
import io
import logging

import pytest

from revmark.cli import (
    EXIT_CONVERSION_ERROR,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_options,
    create_parser,
    get_exit_code_for_exception,
    main,
    should_use_rich_output,
)
from revmark.exceptions import DependencyError, MalformedListError, RevmarkError, ValidationError


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def html_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<p>Hello <strong>world</strong></p>", encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Tests for merging flags into ConverterOptions."""

    def parse(self, *args):
        return create_parser().parse_args(["page.html", "--no-config", *args])

    def test_defaults(self):
        options = build_options(self.parse())

        assert options.github_flavored is False
        assert options.wrap_line_length == 80

    def test_flags(self):
        options = build_options(
            self.parse(
                "--github-flavored",
                "--bullet",
                "*",
                "--emphasis",
                "_",
                "--wrap",
                "100",
                "--table-header",
                "empty_row",
                "--unknown-tags",
                "drop",
                "--remove-comments",
                "--smart-href",
            )
        )

        assert options.github_flavored is True
        assert options.list_bullet_char == "*"
        assert options.emphasis_char == "_"
        assert options.wrap_line_length == 100
        assert options.table_without_header_row_handling == "empty_row"
        assert options.unknown_tags == "drop"
        assert options.remove_comments is True
        assert options.smart_href_handling is True

    def test_no_wrap(self):
        assert build_options(self.parse("--no-wrap")).wrap_line_length is None

    def test_keep_blank_lines(self):
        assert build_options(self.parse("--keep-blank-lines")).remove_multiple_consecutive_blank_lines is False

    def test_list_arguments(self):
        options = build_options(
            self.parse("--pass-through-tags", "sup, sub", "--allow-scheme", "https", "--allow-scheme", "")
        )

        assert options.pass_through_tags == ("sup", "sub")
        assert options.whitelist_uri_schemes == ("https", "")

    def test_invalid_wrap_value(self):
        with pytest.raises(argparse.ArgumentTypeError):
            build_options(self.parse("--wrap", "-3"))

    def test_config_file_then_flags(self, tmp_path):
        config = tmp_path / "revmark.toml"
        config.write_text('list_bullet_char = "+"\nwrap_line_length = 60\n', encoding="utf-8")

        parsed = create_parser().parse_args(["page.html", "--config", str(config), "--wrap", "70"])
        options = build_options(parsed)

        assert options.list_bullet_char == "+"
        assert options.wrap_line_length == 70


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for the main entry point."""

    def test_file_to_file(self, html_file, tmp_path):
        out = tmp_path / "page.md"

        assert main([str(html_file), "-o", str(out), "--no-config"]) == EXIT_SUCCESS
        assert out.read_text(encoding="utf-8") == "Hello **world**\n"

    def test_file_to_stdout(self, html_file, capsys):
        assert main([str(html_file), "--no-config"]) == EXIT_SUCCESS

        assert capsys.readouterr().out == "Hello **world**\n"

    def test_stdin_to_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<ul><li>a</li><li>b</li></ul>"))

        assert main(["-", "--no-config", "--bullet", "*"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* a\n* b\n"

    def test_missing_input_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.html"), "--no-config"]) == EXIT_FILE_ERROR
        assert capsys.readouterr().err.startswith("Error:")

    def test_missing_config_file(self, html_file, tmp_path):
        assert main([str(html_file), "--config", str(tmp_path / "nope.toml")]) == EXIT_VALIDATION_ERROR

    def test_unknown_tag_raises_conversion_error(self, tmp_path, capsys):
        path = tmp_path / "custom.html"
        path.write_text("<p><foo>x</foo></p>", encoding="utf-8")

        assert main([str(path), "--no-config", "--unknown-tags", "raise"]) == EXIT_CONVERSION_ERROR
        assert "Unknown tag: foo" in capsys.readouterr().err

    def test_deep_document_is_a_validation_error(self, tmp_path):
        path = tmp_path / "deep.html"
        path.write_text("<div>" * 120 + "x" + "</div>" * 120, encoding="utf-8")

        assert main([str(path), "--no-config"]) == EXIT_VALIDATION_ERROR

    def test_log_file(self, html_file, tmp_path):
        log_file = tmp_path / "revmark.log"

        args = [str(html_file), "--no-config", "--log-level", "DEBUG", "--log-file", str(log_file)]

        assert main(args) == EXIT_SUCCESS
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Converting" in log_file.read_text(encoding="utf-8")

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "revmark" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestRichOutput:
    """Tests for terminal rendering with Rich."""

    def parse(self, *args):
        return create_parser().parse_args(["page.html", "--no-config", *args])

    def test_disabled_without_flag(self):
        assert should_use_rich_output(self.parse("--force-rich")) is False

    def test_forced(self):
        assert should_use_rich_output(self.parse("--rich", "--force-rich")) is True

    def test_requires_tty(self):
        assert should_use_rich_output(self.parse("--rich"), stream=io.StringIO()) is False

    def test_never_used_for_output_file(self):
        assert should_use_rich_output(self.parse("--rich", "--force-rich", "-o", "out.md")) is False

    def test_rendered_markdown(self, html_file, capsys):
        pytest.importorskip("rich")

        assert main([str(html_file), "--no-config", "--rich", "--force-rich"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "Hello world" in out
        assert "**" not in out


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Tests for get_exit_code_for_exception."""

    @pytest.mark.parametrize(
        "exception,expected",
        [
            (DependencyError("missing"), EXIT_DEPENDENCY_ERROR),
            (ImportError("missing"), EXIT_DEPENDENCY_ERROR),
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (argparse.ArgumentTypeError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("gone"), EXIT_FILE_ERROR),
            (MalformedListError(), EXIT_CONVERSION_ERROR),
            (RevmarkError("other"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, exception, expected):
        assert get_exit_code_for_exception(exception) == expected
