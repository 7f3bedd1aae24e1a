"""
PassForge Shared Module
=======================

Configuration, logging, console and network utilities shared by the
PassForge package.
"""

from shared.config import ForgeConfig, get_config

__all__ = ["ForgeConfig", "get_config"]
