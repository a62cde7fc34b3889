"""Unit tests for CLI command behavior."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

import ibconv.application.use_cases as use_cases_module
from ibconv.application.results import RunSummary
from ibconv.cli import cli as cli_module
from ibconv.errors import WalkError
from ibconv.schemas import ConversionConfig

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """Drop the stderr handler the CLI installs so it cannot outlive the runner."""
    yield
    logger = logging.getLogger("ibconv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def captured_run(monkeypatch: pytest.MonkeyPatch) -> list[ConversionConfig]:
    """Replace the conversion use-case and record the configs it receives."""
    seen: list[ConversionConfig] = []

    def fake_run(config: ConversionConfig, **_: object) -> RunSummary:
        seen.append(config)
        return RunSummary()

    monkeypatch.setattr(use_cases_module, "run_conversion", fake_run)
    return seen


def test_help_flag_prints_usage_without_converting(captured_run: list[ConversionConfig]) -> None:
    """Print banner and usage for -h and never start a run."""
    result = runner.invoke(cli_module.app, ["-h"])

    assert result.exit_code == 0
    assert "[ ibconv v0.2 ]" in result.output
    assert "Usage: ibconv" in result.output
    assert captured_run == []


def test_long_help_flag_matches_short(captured_run: list[ConversionConfig]) -> None:
    """Accept --help as an alias of -h."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "Usage: ibconv" in result.output
    assert captured_run == []


def test_defaults_forwarded_to_use_case(captured_run: list[ConversionConfig]) -> None:
    """Build the default configuration when no flags are given."""
    result = runner.invoke(cli_module.app, [])

    assert result.exit_code == 0, result.output
    assert "Conversion complete." in result.output
    (config,) = captured_run
    assert config.input_folder == Path("./source")
    assert config.output_folder == Path("./sink")
    assert config.size == (280, 180)
    assert config.target_format == "jpg"


def test_flags_forwarded_to_use_case(
    tmp_path: Path, captured_run: list[ConversionConfig]
) -> None:
    """Forward short flags, normalizing the format to lowercase."""
    result = runner.invoke(
        cli_module.app,
        ["-i", str(tmp_path / "in"), "-o", str(tmp_path / "out"), "-r", "800,600", "-f", "PNG"],
    )

    assert result.exit_code == 0, result.output
    (config,) = captured_run
    assert config.input_folder == tmp_path / "in"
    assert config.output_folder == tmp_path / "out"
    assert config.size == (800, 600)
    assert config.target_format == "png"
    assert config.verbose is False


def test_environment_supplies_defaults(
    tmp_path: Path, captured_run: list[ConversionConfig]
) -> None:
    """Read folder, resolution and format from IBCONV_* variables."""
    env = {
        "IBCONV_INPUT": str(tmp_path / "env-in"),
        "IBCONV_OUTPUT": str(tmp_path / "env-out"),
        "IBCONV_RESOLUTION": "64,32",
        "IBCONV_FORMAT": "png",
    }
    result = runner.invoke(cli_module.app, [], env=env)

    assert result.exit_code == 0, result.output
    (config,) = captured_run
    assert config.input_folder == tmp_path / "env-in"
    assert config.output_folder == tmp_path / "env-out"
    assert config.size == (64, 32)
    assert config.target_format == "png"


def test_verbose_prints_configuration(captured_run: list[ConversionConfig]) -> None:
    """Echo the resolved configuration when -v is given."""
    result = runner.invoke(cli_module.app, ["-v", "-r", "10,20"])

    assert result.exit_code == 0, result.output
    assert "Starting ibconv..." in result.output
    assert "Target Size: 10x20" in result.output
    assert "Target Format: jpg" in result.output
    assert captured_run[0].verbose is True


@pytest.mark.parametrize(
    "value", ["0,100", "100,-5", "abc,100", "100", "100,100,50", "99999999999999999999,10"]
)
def test_invalid_resolution_is_fatal(
    value: str, captured_run: list[ConversionConfig]
) -> None:
    """Exit non-zero with a descriptive message for bad resolutions."""
    result = runner.invoke(cli_module.app, ["-r", value])

    assert result.exit_code != 0
    assert "Invalid resolution format. Must be W,H." in result.output
    assert captured_run == []


def test_invalid_format_is_fatal(captured_run: list[ConversionConfig]) -> None:
    """Exit non-zero for output formats other than jpg and png."""
    result = runner.invoke(cli_module.app, ["-f", "bmp"])

    assert result.exit_code != 0
    assert "Invalid format. Must be 'jpg' or 'png'." in result.output
    assert captured_run == []


def test_settings_validated_before_help(captured_run: list[ConversionConfig]) -> None:
    """Reject bad settings even when -h is requested."""
    result = runner.invoke(cli_module.app, ["-h", "-f", "bmp"])
    assert result.exit_code != 0
    assert "Usage: ibconv" not in result.output


def test_setup_error_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Map fatal run errors to a non-zero exit and hide the traceback."""

    def fake_run(config: ConversionConfig, **_: object) -> RunSummary:
        del config
        raise WalkError("Error walking directory source: boom")

    monkeypatch.setattr(use_cases_module, "run_conversion", fake_run)
    result = runner.invoke(cli_module.app, [])

    assert result.exit_code == 1
    assert "WalkError" in result.output
    assert "Traceback" not in result.output
    assert "Conversion complete." not in result.output


def test_debug_prints_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    """Include the traceback for fatal errors under --debug."""

    def fake_run(config: ConversionConfig, **_: object) -> RunSummary:
        del config
        raise WalkError("boom")

    monkeypatch.setattr(use_cases_module, "run_conversion", fake_run)
    result = runner.invoke(cli_module.app, ["--debug"])

    assert result.exit_code == 1
    assert "Traceback" in result.output


def test_missing_input_folder_is_fatal(tmp_path: Path) -> None:
    """Exit non-zero when the input folder does not exist."""
    result = runner.invoke(
        cli_module.app, ["-i", str(tmp_path / "nope"), "-o", str(tmp_path / "out")]
    )

    assert result.exit_code != 0
    assert "does not exist" in result.output
    assert not (tmp_path / "out").exists()


def test_per_file_failures_keep_exit_status_zero(tmp_path: Path, make_image) -> None:
    """Warn about a corrupt file but still finish successfully."""
    source = tmp_path / "in"
    make_image(source / "good.png")
    (source / "bad.png").write_bytes(b"garbage")

    result = runner.invoke(
        cli_module.app,
        ["-i", str(source), "-o", str(tmp_path / "out"), "-r", "4,4", "-f", "png", "-v"],
    )

    assert result.exit_code == 0, result.output
    assert "Failed to process" in result.output
    assert "Converted:" in result.output
    assert "Conversion complete." in result.output
    assert (tmp_path / "out" / "good.png").is_file()


def test_unexpected_run_failure_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    """Report an unexpected crash as a one-line error with exit status 1."""

    def fake_run(config: ConversionConfig, **_: object) -> RunSummary:
        del config
        raise RuntimeError("disk vanished")

    monkeypatch.setattr(use_cases_module, "run_conversion", fake_run)
    result = runner.invoke(cli_module.app, [])

    assert result.exit_code == 1
    assert "RuntimeError: disk vanished" in result.output
    assert "Traceback" not in result.output
    assert "Conversion complete." not in result.output
