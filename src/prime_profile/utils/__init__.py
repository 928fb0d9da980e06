"""Utility modules for prime_profile."""

from prime_profile.utils.logging import setup_logger
from prime_profile.utils.report import SieveReport, run_report

__all__ = [
    "setup_logger",
    "SieveReport",
    "run_report",
]
