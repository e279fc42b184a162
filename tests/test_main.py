"""Tests for the command-line entry point."""

from datetime import date
from unittest.mock import patch

import main
from models import SearchRequest
from reporting.run_set import RunSetError
from services.search_runner import RunResult

MUMBAI = SearchRequest("Mumbai", date(2025, 6, 10), date(2025, 6, 12))


@patch("main.configure_logging")
@patch("main.run_all", side_effect=RunSetError("Input Excel not found"))
def test_missing_run_set_exit_code(run_all, configure_logging):
    assert main.main([]) == 2


@patch("main.configure_logging")
@patch("main.run_all", return_value=[])
def test_empty_run_set_exit_code(run_all, configure_logging):
    assert main.main([]) == 2


@patch("main.configure_logging")
@patch("main.run_all")
def test_exit_code_reflects_failures(run_all, configure_logging):
    run_all.return_value = [RunResult(MUMBAI, succeeded=True)]
    assert main.main(["--pages", "1"]) == 0
    assert run_all.call_args.args[0].pages == 1

    run_all.return_value = [RunResult(MUMBAI, succeeded=True), RunResult(MUMBAI, succeeded=False, error="boom")]
    assert main.main([]) == 1
