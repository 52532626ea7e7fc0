"""Console shared by every `emt` command, and the common error exit."""

import functools

from rich.console import Console
from rich.markup import escape

from emt_api.errors import EmtError

console = Console()


def handle_errors(fn):
    """Print an EmtError in red and exit with status 1."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except EmtError as e:
            console.print(f"[red]Error ({e.code}): {escape(str(e))}[/red]")
            raise SystemExit(1)
    return wrapper
