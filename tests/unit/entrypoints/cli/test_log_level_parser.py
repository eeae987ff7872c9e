"""Unit tests for the CLI log level parser.

These tests exercise jsonclean.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering default behavior, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from jsonclean.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


def make_ctx():
    """Create a minimal Click context stub; the callback never uses it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {"click_extra": logging.WARNING}


def test_defaults_are_not_mutated():
    """Overrides never leak back into DEFAULT_LIB_LEVELS."""
    parse_log_level(make_ctx(), None, ("click_extra=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"click_extra": logging.WARNING}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("jsonclean=INFO", "click_extra=ERROR", "jsonclean=WARNING")
    out = parse_log_level(make_ctx(), None, value)
    assert out["jsonclean"] == logging.WARNING
    assert out["click_extra"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    value = "jsonclean=INFO,  urllib3=WARNING click_extra=ERROR"
    out = parse_log_level(make_ctx(), None, value)
    assert out["jsonclean"] == logging.INFO
    assert out["click_extra"] == logging.ERROR
    assert out["urllib3"] == logging.WARNING


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    value = ("jsonclean=info", "click_extra=WaRnInG")
    out = parse_log_level(make_ctx(), None, value)
    assert out["jsonclean"] == logging.INFO
    assert out["click_extra"] == logging.WARNING


@pytest.mark.parametrize(
    ("value", "match"),
    [
        (("not-a-pair",), "Expected NAME=LEVEL"),
        (("jsonclean=LOUD",), "Invalid log level"),
        (("=DEBUG",), "Missing logger name"),
    ],
    ids=["no-equals", "unknown-level", "empty-name"],
)
def test_malformed_items_raise(value, match):
    """Malformed items raise click.BadParameter with a helpful message."""
    with pytest.raises(click.BadParameter, match=match):
        parse_log_level(make_ctx(), None, value)
