"""Themes and widget libraries that map entity type slots to resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .ui_types import BrushThemeType, ColorType, FontType, WidgetType


@dataclass
class Theme:
    """Colors, fonts and brushes assigned to the theme slots."""

    colors_map: dict[ColorType, Any] = field(default_factory=dict)
    fonts_map: dict[FontType, Any] = field(default_factory=dict)
    brushes_map: dict[BrushThemeType, Any] = field(default_factory=dict)

    def color_by_type(self, color_type: ColorType) -> Optional[Any]:
        """Return the color assigned to the slot, or None when there is none."""
        return self.colors_map.get(color_type)

    def font_by_type(self, font_type: FontType) -> Optional[Any]:
        """Return the font assigned to the slot, or None when there is none."""
        return self.fonts_map.get(font_type)

    def brush_by_type(self, brush_type: BrushThemeType) -> Optional[Any]:
        """Return the brush assigned to the slot, or None when there is none."""
        return self.brushes_map.get(brush_type)


@dataclass
class WidgetsLibrary:
    """Widget classes assigned to the widget slots."""

    widgets: dict[WidgetType, Any] = field(default_factory=dict)

    def widget_by_type(self, widget_type: WidgetType) -> Optional[Any]:
        """Return the widget class assigned to the slot, or None when there is none."""
        return self.widgets.get(widget_type)