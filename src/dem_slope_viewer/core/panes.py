"""
Display pane adapter around a geemap.Map.

The pane owns the overlay layers and controls it adds, so resetting layers
or removing a legend never needs to search the map's children.
"""

import logging
from typing import Any

import ipywidgets as widgets
from ipyleaflet import WidgetControl

from ..constants import TITLE_FONT_SIZE

logger = logging.getLogger(__name__)


class MapPane:
    """One map pane: overlay layers, a title label, and floating widgets."""

    def __init__(self, map_widget: Any, title_position: str) -> None:
        self.map = map_widget
        self._layer_names: list[str] = []
        self._title = widgets.Label(
            value="",
            style={"font_weight": "bold", "font_size": TITLE_FONT_SIZE},
        )
        self._title_control = WidgetControl(widget=self._title, position=title_position)
        self.map.add(self._title_control)

    @property
    def title(self) -> str:
        return self._title.value

    @property
    def layer_names(self) -> list[str]:
        return list(self._layer_names)

    def set_title(self, text: str) -> None:
        self._title.value = text

    def reset_layers(self) -> None:
        """Remove every overlay layer this pane added."""
        for name in self._layer_names:
            layer = self.map.find_layer(name)
            if layer is not None:
                self.map.remove(layer)
        self._layer_names = []

    def add_layer(self, image: Any, vis: dict, name: str) -> None:
        self.map.add_layer(image, vis, name)
        self._layer_names.append(name)

    def add_widget(self, widget: Any, position: str) -> Any:
        """Float a widget over the map; returns the control handle."""
        control = WidgetControl(widget=widget, position=position)
        self.map.add(control)
        return control

    def remove_widget(self, control: Any) -> None:
        """Remove a control previously returned by add_widget; None is a no-op."""
        if control is None:
            return
        if control in self.map.controls:
            self.map.remove(control)

    def center_object(self, region: Any, zoom: int) -> None:
        self.map.center_object(region, zoom)
