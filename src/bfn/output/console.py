"""In-memory Rich consoles.

Renderers print into a Console backed by StringIO and hand the text back,
so ``format_result`` stays a plain ``-> str`` function. Rich drops color
codes by itself when the real stream is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

BFN_THEME = Theme(
    {
        "bfn.ok": "bold green",
        "bfn.error": "bold red",
        "bfn.warning": "bold yellow",
        "bfn.op": "bold cyan",
        "bfn.key": "dim",
        "bfn.value": "bold",
        "bfn.absent": "dim italic",
        "bfn.id": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed Console that writes into memory.

    Highlighting and emoji codes are off so values print exactly as given.
    """
    return Console(
        file=StringIO(),
        theme=BFN_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
