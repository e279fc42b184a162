"""
Run orchestration for hotel search runs.
"""

from .search_runner import RunResult, run_all, run_request, run_search

__all__ = ['RunResult', 'run_all', 'run_request', 'run_search']
