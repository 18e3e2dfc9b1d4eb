"""Terminal presentation layer: view state plus rich rendering."""

from .controller import ViewController
from .terminal import TerminalView

__all__ = ["TerminalView", "ViewController"]
