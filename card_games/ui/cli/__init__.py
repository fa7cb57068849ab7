"""Console user interface.

This package provides the command-line front-end:
- the session and click entry point
- the renderer (display logic)
- the input handler (user interaction)
"""

from .cli_game import CardGamesCLI, main
from .render import CLIRenderer, ConsoleOutput
from .input_handler import CLIInputHandler

__all__ = [
    'CardGamesCLI',
    'main',
    'CLIRenderer',
    'ConsoleOutput',
    'CLIInputHandler',
]
