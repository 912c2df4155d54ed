import pytest

from storekit.ui_types import (
    BrushThemeType,
    ColorType,
    EntityTypeName,
    FontType,
    ThemeParameters,
    WidgetType,
)


@pytest.mark.parametrize("enum_type", [WidgetType, ColorType, FontType, BrushThemeType])
def test_default_is_zero_and_values_are_consecutive(enum_type):
    members = list(enum_type)
    assert members[0] is enum_type.DEFAULT
    assert enum_type.DEFAULT == 0
    assert [int(m) for m in members] == list(range(len(members)))
    assert members[-1] is enum_type.MAX


@pytest.mark.parametrize("enum_type", [WidgetType, ColorType, FontType])
def test_thirty_slots(enum_type):
    assert enum_type.MAX == enum_type.TYPE_30 + 1


def test_brush_has_sixty_two_slots():
    assert BrushThemeType.MAX == BrushThemeType.TYPE_62 + 1
    assert BrushThemeType(62) is BrushThemeType.TYPE_62


def test_enum_lookup_by_value():
    assert WidgetType(3) is WidgetType.TYPE_3
    with pytest.raises(ValueError):
        ColorType(200)


def test_entity_type_name_default_is_int32_max():
    assert EntityTypeName().type_as_int == 2147483647
    assert EntityTypeName().name == ""


def test_entity_type_name_holds_values():
    entry = EntityTypeName(int(WidgetType.TYPE_1), "Button")
    assert entry.type_as_int == 1
    assert entry.name == "Button"


def test_theme_parameters_empty_by_default():
    assert ThemeParameters().is_empty() is True


@pytest.mark.parametrize(
    "parameters",
    [
        ThemeParameters(colors={"Background": ColorType.TYPE_1}),
        ThemeParameters(fonts={"Title": FontType.TYPE_2}),
        ThemeParameters(brushes={"Button": BrushThemeType.TYPE_5}),
    ],
)
def test_any_entry_makes_parameters_non_empty(parameters):
    assert parameters.is_empty() is False


def test_clear_empties_all_maps():
    parameters = ThemeParameters(
        colors={"Background": ColorType.TYPE_1},
        fonts={"Title": FontType.TYPE_2},
        brushes={"Button": BrushThemeType.TYPE_5},
    )
    parameters.clear()
    assert parameters.colors == {}
    assert parameters.fonts == {}
    assert parameters.brushes == {}
    assert parameters.is_empty() is True


def test_parameters_do_not_share_maps():
    first = ThemeParameters()
    second = ThemeParameters()
    first.colors["Text"] = ColorType.TYPE_4
    assert second.colors == {}