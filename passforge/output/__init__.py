"""
PassForge Output Module
========================

Console display and batch export for PassForge results.
"""

from passforge.output.console import ForgeConsoleOutput, mask_password
from passforge.output.report import BatchReportGenerator

__all__ = [
    "BatchReportGenerator",
    "ForgeConsoleOutput",
    "mask_password",
]
