"""
wifimigrate CLI.
"""

from wifimigrate.cli.main import cli

__all__ = ["cli"]
