"""
Gradient legends for map panes.

The colour bar is rendered locally from the palette with numpy and Pillow,
so building a legend needs no Earth Engine round trip.
"""

import io
import logging
from typing import Any

import ipywidgets as widgets
import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..constants import LEGEND_SWATCH_HEIGHT, LEGEND_SWATCH_WIDTH, LEGEND_TITLE_FONT_SIZE
from ..models.descriptors import VisualizationParams

logger = logging.getLogger(__name__)


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def gradient_rgb(palette: tuple[str, ...] | list[str], width: int) -> NDArray[np.uint8]:
    """Linear colour ramp through the palette stops, shape (width, 3).

    A single-colour palette yields a flat bar.
    """
    stops = np.array([_hex_to_rgb(c) for c in palette], dtype=np.float64)
    if len(stops) == 1:
        return np.repeat(stops.astype(np.uint8), width, axis=0)

    positions = np.linspace(0.0, 1.0, len(stops))
    samples = np.linspace(0.0, 1.0, width)
    channels = [np.interp(samples, positions, stops[:, i]) for i in range(3)]
    return np.round(np.stack(channels, axis=-1)).astype(np.uint8)


def gradient_png(
    palette: tuple[str, ...] | list[str],
    width: int = LEGEND_SWATCH_WIDTH,
    height: int = LEGEND_SWATCH_HEIGHT,
) -> bytes:
    """Render a horizontal palette gradient as PNG bytes.

    Args:
        palette: Ordered hex colours without '#'
        width: Bar width in pixels
        height: Bar height in pixels

    Returns:
        PNG bytes
    """
    row = gradient_rgb(palette, width)
    rgb = np.repeat(row[np.newaxis, :, :], height, axis=0)
    img = Image.fromarray(rgb)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _format_value(value: float) -> str:
    return f"{value:g}"


def build_legend(vis: VisualizationParams, title: str) -> Any:
    """Legend panel: bold title, colour bar, min and max labels."""
    heading = widgets.Label(
        value=title,
        style={"font_weight": "bold", "font_size": LEGEND_TITLE_FONT_SIZE},
        layout=widgets.Layout(margin="0 0 4px 0"),
    )
    bar = widgets.Image(
        value=gradient_png(vis.palette),
        format="png",
        layout=widgets.Layout(width="100%", height=f"{LEGEND_SWATCH_HEIGHT}px", margin="0 8px"),
    )
    labels = widgets.HBox(
        [
            widgets.Label(_format_value(vis.min), layout=widgets.Layout(margin="0 8px 0 0")),
            widgets.Label(_format_value(vis.max), layout=widgets.Layout(margin="0 0 0 8px")),
        ],
        layout=widgets.Layout(justify_content="space-between"),
    )
    return widgets.VBox([heading, bar, labels], layout=widgets.Layout(padding="8px 15px"))
