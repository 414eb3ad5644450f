"""
fntoolbox CLI

Commands:
- fntoolbox replay - Replay an action log through a reducer
- fntoolbox version - Show version information
"""

from fntoolbox import __version__

__all__ = ["__version__"]
