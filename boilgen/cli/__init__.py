"""
CLI module for boilgen.

Provides the main entry point that is installed as the ``boilgen`` console script.
"""

from .commands import main

__all__ = ["main"]
