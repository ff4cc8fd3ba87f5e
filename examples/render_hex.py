"""Terminal demo drawing a hex and its ring of neighbors.

Run with ``python examples/render_hex.py`` after installing the ``examples``
extra. Press Escape or ``q`` to quit.
"""

from __future__ import annotations

from rich.console import RenderableType
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import Footer, Header

from hexgrid import Axial
from hexgrid.render import RenderSettings, render_text


class HexOutlines(Widget):
    """Strokes the outline of each cell, rescaled to the widget size."""

    DEFAULT_CSS = """
    HexOutlines {
        height: 1fr;
        width: 100%;
    }
    """

    def __init__(self, cells: list[Axial[int]], *, hex_scale: float = 0.3) -> None:
        super().__init__()
        self.cells = cells
        self.hex_scale = hex_scale

    def render(self) -> RenderableType:
        settings = RenderSettings(
            width=max(self.size.width, 1),
            height=max(self.size.height, 1),
            hex_scale=self.hex_scale,
            cell_aspect=2.0,
        )
        return render_text(self.cells, settings, style="bold")


class HexDemo(App[None]):
    BINDINGS = [
        Binding("escape", "quit", "Quit"),
        Binding("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        origin = Axial.origin()
        yield Header(show_clock=False)
        yield HexOutlines([origin, *origin.neighbors()])
        yield Footer()


if __name__ == "__main__":
    HexDemo().run()
