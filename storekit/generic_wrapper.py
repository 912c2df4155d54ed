"""A widget wrapper that picks its widget class and theme from the UI builder settings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from .ui_settings import UIBuilderSettings
from .ui_theme import Theme
from .ui_types import ThemeParameters, WidgetType


def _copy_parameters(parameters: ThemeParameters) -> ThemeParameters:
    return ThemeParameters(
        colors=dict(parameters.colors),
        fonts=dict(parameters.fonts),
        brushes=dict(parameters.brushes),
    )


@dataclass
class GenericWrapper:
    """Wraps a widget chosen by slot from the current widgets library."""

    widget_library_type: WidgetType = WidgetType.DEFAULT
    override_widget: Optional[Any] = None
    override_default_theme: bool = False
    theme: Optional[Theme] = None
    parameters: ThemeParameters = field(default_factory=ThemeParameters)
    settings: Optional[UIBuilderSettings] = field(default=None, repr=False, compare=False)
    on_theme_updated: Optional[Callable[[GenericWrapper], Any]] = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.settings is not None:
            self.settings.subscribe(self._theme_updated)

    def _theme_updated(self, new_theme: Optional[Theme]) -> None:
        if self.on_theme_updated is not None:
            self.on_theme_updated(self)

    def widget_class(self) -> Optional[Any]:
        """Return the override widget, else the library's widget for the slot, else None."""
        if self.override_widget is not None:
            return self.override_widget
        if self.settings is None or self.settings.widgets_library is None:
            return None
        return self.settings.widgets_library.widget_by_type(self.widget_library_type)

    def update_theme_parameters(self, parameters: ThemeParameters) -> None:
        """Adopt new theme parameters.

        Empty parameters clear the current ones. The new parameters replace the
        current ones when these are empty or lack any of the new keys;
        otherwise the current parameters are kept as they are.
        """
        if parameters.is_empty():
            self.parameters.clear()
            return
        if self.parameters.is_empty():
            self.parameters = _copy_parameters(parameters)
            return
        for incoming, current in (
            (parameters.colors, self.parameters.colors),
            (parameters.fonts, self.parameters.fonts),
            (parameters.brushes, self.parameters.brushes),
        ):
            if any(key not in current for key in incoming):
                self.parameters = _copy_parameters(parameters)
                return