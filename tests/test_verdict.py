"""Tests for the verdict aggregator."""

import pytest

from gitsniffer.exceptions import ToolFailure
from gitsniffer.models import ToolResult
from gitsniffer.verdict import aggregate

_PHPCS_REPORT = """\
FILE: /srv/app/a.php
----------------------------------------------------------------------
FOUND 1 ERROR AFFECTING 1 LINE
----------------------------------------------------------------------
 3 | ERROR | [x] Expected 1 space after IF keyword; 0 found
   |       |     (PSR2.ControlStructures.ControlStructureSpacing)
----------------------------------------------------------------------
"""

_ESLINT_REPORT = """\
/srv/app/b.js
  1:7  error  'unused' is assigned a value but never used  no-unused-vars
"""


class TestAggregate:
    def test_all_clean(self):
        verdict = aggregate([ToolResult("phpcs"), ToolResult("eslint")])
        assert verdict.passed is True
        assert verdict.exit_code == 0

    def test_no_results(self):
        assert aggregate([]).passed is True

    def test_whitespace_output_is_clean(self):
        assert aggregate([ToolResult("phpcs", output="\n  \n")]).passed is True

    def test_phpcs_failure_printed_verbatim(self, capsys):
        with pytest.raises(ToolFailure) as exc_info:
            aggregate([ToolResult("phpcs", output=_PHPCS_REPORT, exit_status=2)])
        out = capsys.readouterr().out
        assert _PHPCS_REPORT in out
        assert exc_info.value.messages == [_PHPCS_REPORT]
        assert exc_info.value.exit_code == 1

    def test_eslint_failure_goes_to_stderr(self, capsys):
        with pytest.raises(ToolFailure):
            aggregate([ToolResult("phpcs"), ToolResult("eslint", output=_ESLINT_REPORT)])
        captured = capsys.readouterr()
        assert _ESLINT_REPORT in captured.err
        assert _ESLINT_REPORT not in captured.out

    def test_both_fail(self, capsys):
        with pytest.raises(ToolFailure) as exc_info:
            aggregate(
                [
                    ToolResult("phpcs", output=_PHPCS_REPORT),
                    ToolResult("eslint", output=_ESLINT_REPORT),
                ]
            )
        assert exc_info.value.messages == [_PHPCS_REPORT, _ESLINT_REPORT]
        assert "phpcs, eslint" in str(exc_info.value)

    def test_fixer_output_never_fails(self):
        verdict = aggregate(
            [ToolResult("phpcbf", output="PHPCBF RESULT SUMMARY\nA TOTAL OF 1 ERROR WAS FIXED\n")]
        )
        assert verdict.passed is True

    def test_exit_status_alone_does_not_fail(self):
        assert aggregate([ToolResult("eslint", output="", exit_status=1)]).passed is True
