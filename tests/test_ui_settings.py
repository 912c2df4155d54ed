import pytest

from storekit.ui_settings import UIBuilderSettings, load_type
from storekit.ui_theme import Theme
from storekit.ui_types import (
    INT32_MAX,
    BrushThemeType,
    ColorType,
    EntityTypeName,
    FontType,
    WidgetType,
)


def test_default_widget_names_start_with_button():
    settings = UIBuilderSettings()
    assert settings.widget_types[0] == EntityTypeName(1, "Button")
    assert settings.widget_types[-1].name == "InputExecute"


def test_default_slots_are_numbered_from_one_in_order():
    settings = UIBuilderSettings()
    for types in (
        settings.widget_types,
        settings.color_types,
        settings.font_types,
        settings.brush_types,
    ):
        assert [entry.type_as_int for entry in types] == list(range(1, len(types) + 1))


def test_default_fonts_and_colors():
    settings = UIBuilderSettings()
    assert [entry.name for entry in settings.font_types] == ["MainBold", "MainRegular"]
    assert settings.color_types[1] == EntityTypeName(2, "Main")
    assert settings.brush_types[-1] == EntityTypeName(
        len(settings.brush_types), "InputDisabled"
    )


def test_display_names_for_widgets():
    names = UIBuilderSettings().display_names(WidgetType)
    assert names[WidgetType.DEFAULT] == "Default"
    assert names[WidgetType(1)] == "Button"
    assert names[WidgetType(17)] == "InputExecute"
    assert WidgetType(18) not in names
    assert WidgetType.MAX not in names


def test_display_names_are_in_enum_order():
    names = UIBuilderSettings().display_names(ColorType)
    assert list(names) == sorted(names)


def test_display_names_for_each_enum_match_settings():
    settings = UIBuilderSettings()
    for enum_type, types in (
        (FontType, settings.font_types),
        (BrushThemeType, settings.brush_types),
    ):
        names = settings.display_names(enum_type)
        assert len(names) == len(types) + 1
        for entry in types:
            assert names[enum_type(entry.type_as_int)] == entry.name


def test_display_names_unknown_enum_raises():
    from enum import IntEnum

    class Other(IntEnum):
        A = 0

    with pytest.raises(ValueError):
        UIBuilderSettings().display_names(Other)


def test_load_type_ignores_out_of_range_slots():
    types = [
        EntityTypeName(0, "Zero"),
        EntityTypeName(INT32_MAX, "Unset"),
        EntityTypeName(-1, "Negative"),
        EntityTypeName(1000, "Beyond"),
        EntityTypeName(3, "Third"),
    ]
    names = load_type(FontType, types)
    assert names == {FontType.DEFAULT: "Default", FontType(3): "Third"}


def test_load_type_last_name_wins():
    types = [EntityTypeName(2, "First"), EntityTypeName(2, "Second")]
    names = load_type(ColorType, types)
    assert names[ColorType(2)] == "Second"


def test_load_type_with_no_types_shows_only_default():
    assert load_type(BrushThemeType, []) == {BrushThemeType.DEFAULT: "Default"}


def test_update_theme_notifies_subscribers():
    settings = UIBuilderSettings()
    received = []
    settings.subscribe(received.append)
    theme = Theme(colors_map={ColorType(1): "red"})
    settings.update_theme(theme)
    assert settings.interface_theme is theme
    assert received == [theme]


def test_unsubscribe_stops_notifications():
    settings = UIBuilderSettings()
    received = []
    unsubscribe = settings.subscribe(received.append)
    unsubscribe()
    unsubscribe()
    settings.update_theme(Theme())
    assert received == []
    assert settings.interface_theme == Theme()


def test_instances_do_not_share_type_lists():
    first = UIBuilderSettings()
    second = UIBuilderSettings()
    first.widget_types.append(EntityTypeName(18, "Extra"))
    assert EntityTypeName(18, "Extra") not in second.widget_types