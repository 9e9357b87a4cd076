import logging

from rich.console import Console
from rich.text import Text


class LogHandler(logging.Handler):
    """Renders log records on a rich console, colored by level."""

    level_colors = {
        "DEBUG": "dim",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def __init__(self, console: Console, rich_text: bool = True):
        super().__init__()
        self.console = console
        self.rich_text = rich_text

    def emit(self, record):
        try:
            msg = self.format(record)
            if self.rich_text:
                color = self.level_colors.get(record.levelname, "white")
                self.console.print(Text(msg, style=color))
            else:
                self.console.print(msg, markup=False, highlight=False)
        except Exception:
            self.handleError(record)
