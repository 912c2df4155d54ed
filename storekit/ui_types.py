"""Entity type enumerations and theme parameter sets used by the UI builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

INT32_MAX = 2**31 - 1


def _slot_enum(name: str, slots: int) -> type[IntEnum]:
    """Build an enum with a default member, numbered slots and a sentinel maximum."""
    members = ["DEFAULT", *(f"TYPE_{index}" for index in range(1, slots + 1)), "MAX"]
    return IntEnum(name, members, start=0, module=__name__, qualname=name)


WidgetType = _slot_enum("WidgetType", 30)
WidgetType.__doc__ = "Widget slots that a project can name; 0 is the default widget."

ColorType = _slot_enum("ColorType", 30)
ColorType.__doc__ = "Color slots that a project can name; 0 is the default color."

FontType = _slot_enum("FontType", 30)
FontType.__doc__ = "Font slots that a project can name; 0 is the default font."

BrushThemeType = _slot_enum("BrushThemeType", 62)
BrushThemeType.__doc__ = "Brush slots that a project can name; 0 is the default brush."


@dataclass
class EntityTypeName:
    """A display name given to one numbered entity type slot."""

    type_as_int: int = INT32_MAX
    name: str = ""


@dataclass
class ThemeParameters:
    """Named references to theme colors, fonts and brushes."""

    colors: dict[str, ColorType] = field(default_factory=dict)
    fonts: dict[str, FontType] = field(default_factory=dict)
    brushes: dict[str, BrushThemeType] = field(default_factory=dict)

    def clear(self) -> None:
        """Remove every color, font and brush reference."""
        self.colors.clear()
        self.fonts.clear()
        self.brushes.clear()

    def is_empty(self) -> bool:
        """Whether no color, font or brush reference is set."""
        return not (self.colors or self.fonts or self.brushes)