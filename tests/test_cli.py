import os

from typer.testing import CliRunner

from uricomponent import __version__
from uricomponent.common.config import conf
from uricomponent.logger.colored_logger import SUCCESS
from uricomponent.scripts.uricomponent import app

runner = CliRunner()


def test_encode_arguments():
    result = runner.invoke(app, ["encode", "a b", "café"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a%20b", "caf%C3%A9"]


def test_encode_no_newline():
    result = runner.invoke(app, ["encode", "--no-newline", "100% sure"])
    assert result.exit_code == 0
    assert result.stdout == "100%25%20sure"
    assert conf.newline is False


def test_encode_stdin_strips_one_trailing_newline():
    result = runner.invoke(app, ["encode"], input="hello world\n")
    assert result.exit_code == 0
    assert result.stdout == "hello%20world\n"


def test_encode_stdin_keep_newline():
    result = runner.invoke(app, ["encode", "--keep-newline"], input="x\n")
    assert result.exit_code == 0
    assert result.stdout == "x%0A\n"


def test_encode_empty_stdin():
    result = runner.invoke(app, ["encode"], input="")
    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_verbose_option_sets_config():
    result = runner.invoke(app, ["--verbose", "3", "encode", "x"])
    assert result.exit_code == 0
    assert conf.verbose == 3


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_table_lists_unreserved_bytes():
    result = runner.invoke(app, ["table"])
    assert result.exit_code == 0
    assert "0x7E" in result.stdout
    assert "0x25" not in result.stdout


def test_encode_argument_with_undecodable_bytes():
    # POSIX argv decodes invalid UTF-8 with surrogateescape
    value = os.fsdecode(b"a\xffb")
    result = runner.invoke(app, ["encode", value])
    assert result.exit_code == 0
    assert result.stdout == "a%FFb\n"


def test_batch_option_is_gone():
    result = runner.invoke(app, ["--batch", "encode", "x"])
    assert result.exit_code != 0


def test_table_reports_success(records):
    result = runner.invoke(app, ["table"])
    assert result.exit_code == 0
    assert any(
        r.levelno == SUCCESS and "71 unreserved bytes" in r.getMessage() for r in records
    )
