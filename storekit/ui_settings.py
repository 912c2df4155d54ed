"""Project-wide UI builder settings: entity type names, theme and widgets library."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from .ui_theme import Theme, WidgetsLibrary
from .ui_types import (
    INT32_MAX,
    BrushThemeType,
    ColorType,
    EntityTypeName,
    FontType,
    WidgetType,
)

ThemeListener = Callable[[Optional[Theme]], Any]

DEFAULT_DISPLAY_NAME = "Default"

_DEFAULT_WIDGET_NAMES = (
    "Button",
    "ButtonCounter",
    "IconTextButton",
    "ButtonToggle",
    "SmallIconButton",
    "ButtonMenuMain",
    "ButtonIconStates",
    "Link",
    "Checkbox",
    "Image",
    "Icon",
    "Input",
    "InputSearch",
    "EditableText",
    "Text",
    "RichText",
    "InputExecute",
)

_DEFAULT_COLOR_NAMES = (
    "Transparent",
    "Main",
    "Accent",
    "Inactive",
    "Inactive2",
    "AccentDull",
    "Darkening",
    "Inactive3",
)

_DEFAULT_FONT_NAMES = ("MainBold", "MainRegular")

_DEFAULT_BRUSH_NAMES = (
    "MainButtonInitial",
    "MainButtonHover",
    "MainButtonPressed",
    "MainButtonDisabled",
    "NormalButtonInitial",
    "NormalButtonHover",
    "NormalButtonPressed",
    "NormalButtonDisabled",
    "IconButtonInitial",
    "IconButtonHover",
    "IconButtonPressed",
    "IconButtonDisabled",
    "CheckBoxUncheckedInitial",
    "CheckBoxUncheckedHover",
    "CheckBoxUncheckedPressed",
    "CheckBoxCheckedInitial",
    "CheckBoxCheckedHover",
    "CheckBoxCheckedPressed",
    "PopupMenuButtonClosedInitial",
    "PopupMenuButtonClosedHover",
    "PopupMenuButtonClosedPressed",
    "PopupMenuButtonClosedDisabled",
    "PopupMenuButtonOpenedInitial",
    "PopupMenuButtonOpenedHover",
    "PopupMenuButtonOpenedPressed",
    "PopupMenuButtonOpenedDisabled",
    "InputInitial",
    "InputHover",
    "InputActive",
    "InputDisabled",
)


def _named_slots(names: Iterable[str]) -> list[EntityTypeName]:
    return [EntityTypeName(value, name) for value, name in enumerate(names, start=1)]


def load_type(enum_type: type[IntEnum], types: Iterable[EntityTypeName]) -> dict[IntEnum, str]:
    """Return the visible members of an entity type enum with their display names.

    The first member is always shown as the default. Every other member is
    hidden unless one of ``types`` names it; entries whose slot is not above
    zero and below the int32 maximum, or is not a member, are ignored. When a
    slot is named more than once, the last name wins.
    """
    members = list(enum_type)
    display: dict[IntEnum, str] = {members[0]: DEFAULT_DISPLAY_NAME}
    valid_values = {member.value for member in members}
    for entry in types:
        if 0 < entry.type_as_int < INT32_MAX and entry.type_as_int in valid_values:
            display[enum_type(entry.type_as_int)] = entry.name
    return {member: display[member] for member in members if member in display}


@dataclass
class UIBuilderSettings:
    """Settings of the UI builder shared by a project."""

    widget_types: list[EntityTypeName] = field(
        default_factory=lambda: _named_slots(_DEFAULT_WIDGET_NAMES)
    )
    color_types: list[EntityTypeName] = field(
        default_factory=lambda: _named_slots(_DEFAULT_COLOR_NAMES)
    )
    font_types: list[EntityTypeName] = field(
        default_factory=lambda: _named_slots(_DEFAULT_FONT_NAMES)
    )
    brush_types: list[EntityTypeName] = field(
        default_factory=lambda: _named_slots(_DEFAULT_BRUSH_NAMES)
    )
    interface_theme: Optional[Theme] = None
    widgets_library: Optional[WidgetsLibrary] = None
    _listeners: list[ThemeListener] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def update_theme(self, new_theme: Optional[Theme]) -> None:
        """Switch the interface theme and notify every subscriber."""
        self.interface_theme = new_theme
        for listener in list(self._listeners):
            listener(self.interface_theme)

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Call ``listener`` with the new theme whenever it changes.

        Returns a function that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _types_for(self, enum_type: type[IntEnum]) -> list[EntityTypeName]:
        if enum_type is WidgetType:
            return self.widget_types
        if enum_type is ColorType:
            return self.color_types
        if enum_type is FontType:
            return self.font_types
        if enum_type is BrushThemeType:
            return self.brush_types
        raise ValueError(f"no entity type names are kept for {enum_type!r}")

    def display_names(self, enum_type: type[IntEnum]) -> dict[IntEnum, str]:
        """Return the visible members of ``enum_type`` with their configured names."""
        return load_type(enum_type, self._types_for(enum_type))