from __future__ import annotations

import argparse
import logging

import pytest

from resizer.constants import EXIT_FAILURE, EXIT_OK
from resizer.models.errors import InvalidDimensions, MalformedArguments
from resizer.models.image_model import Dimensions
from resizer.models.run_config import OutputFormat, ScalingHint
from resizer.services.argument_service import ArgumentService, parse_dimensions


@pytest.fixture
def service(caplog) -> ArgumentService:
    caplog.set_level(logging.DEBUG)
    return ArgumentService()


def messages(caplog, level: int):
    return [record.getMessage() for record in caplog.records if record.levelno == level]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1280x720", Dimensions(1280, 720)),
        ("1x1", Dimensions(1, 1)),
        ("100x3000", Dimensions(100, 3000)),
        ("007x9", Dimensions(7, 9)),
    ],
)
def test_parse_dimensions_valid(value, expected):
    assert parse_dimensions(value) == expected


@pytest.mark.parametrize(
    "value",
    ["1280X720", "1280", "x720", "1280x", "", "12a0x720", "-5x10", "+5x10", "0x10", "10x0", "1x2x3", " 10x10", "1.5x2"],
)
def test_parse_dimensions_invalid(value):
    with pytest.raises(InvalidDimensions):
        parse_dimensions(value)


def test_valid_invocation_builds_configuration(service):
    outcome = service.parse(["-d", "320x200", "a.png,dir/b.jpg,a.png"])

    assert outcome.should_run
    assert outcome.exit_code == EXIT_OK
    config = outcome.config
    assert config.dimensions == Dimensions(320, 200)
    assert config.input_paths == ("a.png", "dir/b.jpg", "a.png")
    assert config.output_format is None
    assert config.scaling_hint is None
    assert config.verbose is False


def test_long_options_and_positional_first(service):
    outcome = service.parse(["a.png", "--dimensions", "10x20", "--format", "JPG", "--verbose"])

    assert outcome.config.dimensions == Dimensions(10, 20)
    assert outcome.config.output_format is OutputFormat.JPG
    assert outcome.config.verbose is True


def test_help_prints_usage_and_stops(service, capsys):
    outcome = service.parse(["--help"])

    assert not outcome.should_run
    assert outcome.exit_code == EXIT_OK
    out = capsys.readouterr().out
    assert "usage: resizer [options ...]" in out
    for option in ("--dimensions", "--format", "--output", "--scalinghint", "--help"):
        assert option in out


def test_help_wins_over_missing_dimensions(service):
    outcome = service.parse(["-h"])

    assert outcome.exit_code == EXIT_OK
    assert outcome.config is None


def test_missing_dimensions_aborts(service, caplog, capsys):
    outcome = service.parse(["a.png"])

    assert outcome.config is None
    assert outcome.exit_code == EXIT_FAILURE
    assert "Missing required option: d" in messages(caplog, logging.ERROR)
    assert "usage:" in capsys.readouterr().out


def test_dimensions_without_value_aborts(service, caplog):
    outcome = service.parse(["a.png", "-d"])

    assert outcome.exit_code == EXIT_FAILURE
    assert any("expected one argument" in message for message in messages(caplog, logging.ERROR))


@pytest.mark.parametrize("argv", [["a.png", "-f"], ["-o", "-d", "10x10", "a.png"], ["a.png", "-d", "10x10", "--scalinghint"]])
def test_any_option_without_value_aborts(service, argv):
    assert service.parse(argv).exit_code == EXIT_FAILURE


def test_missing_value_does_not_depend_on_message_wording(service, monkeypatch):
    translations = {"expected one argument": "Ожидался один аргумент"}
    monkeypatch.setattr(argparse, "_", lambda text: translations.get(text, text))

    outcome = service.parse(["a.png", "-d"])

    assert outcome.exit_code == EXIT_FAILURE


def test_unexpected_value_on_flag_is_malformed(service):
    with pytest.raises(MalformedArguments):
        service.parse(["-d", "10x10", "--help=yes", "a.png"])


def test_invalid_dimensions_aborts(service, caplog):
    outcome = service.parse(["-d", "100by100", "a.png"])

    assert outcome.exit_code == EXIT_FAILURE
    assert "Dimension argument was not correct!" in messages(caplog, logging.ERROR)


def test_missing_file_list_warns_and_continues(service, caplog, capsys):
    outcome = service.parse(["-d", "10x10"])

    assert outcome.should_run
    assert outcome.config.input_paths == ()
    assert "Missing argument: comma-separated list of images!" in messages(caplog, logging.WARNING)
    assert "usage:" in capsys.readouterr().out


def test_valid_format_is_accepted_case_insensitive(service):
    outcome = service.parse(["-d", "10x10", "-f", "GIF", "a.png"])

    assert outcome.config.output_format is OutputFormat.GIF


def test_unknown_format_aborts(service, caplog):
    outcome = service.parse(["-d", "10x10", "-f", "bmp", "a.png"])

    assert outcome.exit_code == EXIT_FAILURE
    assert "Error: Wrong output image format!" in messages(caplog, logging.ERROR)


def test_output_folder_prints_notice_only(service, caplog):
    outcome = service.parse(["-d", "10x10", "-o", "elsewhere", "a.png"])

    assert outcome.should_run
    assert outcome.config.output_dir_option == "elsewhere"
    assert "Output folder not implemented!" in messages(caplog, logging.INFO)


@pytest.mark.parametrize("token, expected", [("b", ScalingHint.BICUBIC), ("N", ScalingHint.NEAREST), ("lanczos", None)])
def test_scaling_hint_prints_notice_only(service, caplog, token, expected):
    outcome = service.parse(["-d", "10x10", "-s", token, "a.png"])

    assert outcome.should_run
    assert outcome.config.scaling_hint is expected
    assert "Scaling hint not implemented!" in messages(caplog, logging.INFO)


def test_unknown_option_is_malformed(service, caplog, capsys):
    with pytest.raises(MalformedArguments):
        service.parse(["-d", "10x10", "--bogus", "a.png"])

    assert any("problem parsing" in message for message in messages(caplog, logging.ERROR))
    assert "usage:" in capsys.readouterr().out


def test_extra_positionals_use_first_list(service, caplog):
    outcome = service.parse(["-d", "10x10", "a.png,b.png", "c.png"])

    assert outcome.config.input_paths == ("a.png", "b.png")
    assert any("c.png" in message for message in messages(caplog, logging.WARNING))


def test_empty_entries_in_list_are_dropped(service):
    outcome = service.parse(["-d", "10x10", "a.png,,b.png,"])

    assert outcome.config.input_paths == ("a.png", "b.png")


def test_version_prints_and_stops(service, capsys):
    outcome = service.parse(["--version"])

    assert not outcome.should_run
    assert outcome.exit_code == EXIT_OK
    assert capsys.readouterr().out.strip() == "resizer 0.0.2"
