"""Shared library utilities."""

from reminder_bot.core.logging import get_logger
from reminder_bot.core.repo_parser import RepoReference, parse_repo_reference, split_repo_list

__all__ = [
    "get_logger",
    "RepoReference",
    "parse_repo_reference",
    "split_repo_list",
]
