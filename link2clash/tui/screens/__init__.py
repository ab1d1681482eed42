"""
TUI screens package.
"""

from link2clash.tui.screens.dashboard import DashboardShell

__all__ = ["DashboardShell"]
