"""
validstate CLI - validated reducer tooling

Commands:
- validstate replay - Replay an action log through a validated reducer
- validstate version - Show version information
"""

from validstate import __version__

__all__ = ["__version__"]
