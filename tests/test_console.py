"""Tests for console output suppression."""

from __future__ import annotations

import sys

import pytest

from unitrain.util.console import suppress_console_output


def test_output_suppressed(capsys):
    with suppress_console_output():
        print("hidden")
        sys.stderr.write("hidden too\n")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_streams_restored_after_block(capsys):
    with suppress_console_output():
        pass
    print("visible")
    assert capsys.readouterr().out == "visible\n"


def test_streams_restored_after_exception():
    stdout, stderr = sys.stdout, sys.stderr
    with pytest.raises(ZeroDivisionError):
        with suppress_console_output():
            1 / 0
    assert sys.stdout is stdout
    assert sys.stderr is stderr


def test_nested_blocks_restore_in_order():
    stdout = sys.stdout
    with suppress_console_output():
        inner_saved = sys.stdout
        with suppress_console_output():
            pass
        assert sys.stdout is inner_saved
    assert sys.stdout is stdout
