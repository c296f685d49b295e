"""API module for GBU.

Functions defined here are the single source of truth for the CLI commands.
Merge functions are pure; only the ``cmd_*`` functions touch the filesystem.
"""

__all__ = []
