from add_header.tui.renderers import HeaderConsoleUI

__all__ = ["HeaderConsoleUI"]
