"""
Unit tests for small helpers in __main__.py:
- _report_issues: prints warnings/errors to stdout
- _select_guideline: resolves --guideline / --region
"""

import click
import pytest
from stairval.notepad import create_notepad
from uvecheck.__main__ import _report_issues, _select_guideline


def test_report_issues_outputs_both_blocks(capsys):
    """
    When notepad contains both warnings and errors, the helper should print both sections.
    """
    n = create_notepad("report")
    n.add_warning("warn 1")
    n.add_error("err 1")

    _report_issues(n)
    out = capsys.readouterr().out
    assert "Warnings found in input" in out
    assert "warn 1" in out
    assert "Errors found in input" in out
    assert "err 1" in out


def test_report_issues_silent_when_clean(capsys):
    _report_issues(create_notepad("report"))
    assert capsys.readouterr().out == ""


def test_select_guideline_by_region_or_key():
    assert _select_guideline(None, "portugal").key == "spain_portugal"
    assert _select_guideline("uk", None).key == "uk"


def test_select_guideline_requires_one_choice():
    with pytest.raises(click.UsageError):
        _select_guideline(None, None)
