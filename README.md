# storekit

A small, dependency-free library with two parts:

- builders that describe the HTTP requests of a game store's user inventory
  API (inventory items, virtual currency balance, time-limited items, item
  consumption and coupons);
- a model of a themeable UI builder: entity type slots with project-given
  names, themes, widget libraries, a widget wrapper and an editor for the
  slot names.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Inventory requests

`storekit.inventory_requests` turns the arguments of an inventory call into
an `ApiRequest`: a frozen dataclass with `method`, `url`, `auth_token`,
`body` (a dict, or `None`), `sdk_module` (`"INVENTORY"`), `sdk_version`
(`"4.0.0"`) and `extra_headers`.

- `request.content` is the body serialized as compact JSON, or `""` when
  there is no body.
- `request.headers` holds `Content-Type: application/json`, an
  `Authorization: Bearer ...` header when a token is set, and any
  `extra_headers`.
- `request.with_token(new_token)` returns a copy carrying another token.

The builders:

| Function | Method | Path under `/api/v2/project/{project_id}` |
| --- | --- | --- |
| `get_inventory_request(project_id, auth_token, platform=None, limit=50, offset=0)` | GET | `/user/inventory/items` |
| `get_virtual_currency_balance_request(project_id, auth_token, platform=None)` | GET | `/user/virtual_currency_balance` |
| `get_time_limited_items_request(project_id, auth_token, platform=None)` | GET | `/user/time_limited_items` |
| `consume_item_request(project_id, auth_token, item_sku, quantity=0, instance_id="", platform=None)` | POST | `/user/inventory/item/consume` |
| `coupon_rewards_request(project_id, auth_token, coupon_code)` | GET | `/coupon/code/{coupon_code}/rewards` |
| `redeem_coupon_request(project_id, auth_token, coupon_code)` | POST | `/coupon/redeem` |

`platform` may be a string or an enum member (its name is used). `None` or
`"undefined"` leaves the `platform` query parameter out. The inventory
request always carries `offset` and `limit`, in that order. Path parameters
are percent-encoded.

`consume_item_request` sends `{"sku": ..., "quantity": ..., "instance_id": ...}`;
a quantity of `0` and an empty instance id are sent as JSON `null`.
`redeem_coupon_request` sends `{"coupon_code": ...}`.

```python
from storekit.inventory_requests import consume_item_request, get_inventory_request

request = get_inventory_request("12345", "token", "xsolla", limit=20, offset=40)
print(request.method, request.url)
# GET https://store.xsolla.com/api/v2/project/12345/user/inventory/items?offset=40&limit=20&platform=xsolla

consume = consume_item_request("12345", "token", "health_potion", quantity=1)
print(consume.content)
# {"sku":"health_potion","quantity":1,"instance_id":null}
```

### What this part does not do

The package only builds requests. It does not send them, refresh expired
tokens, or turn the JSON the store returns into data objects; use the HTTP
library of your choice with `request.method`, `request.url`,
`request.headers` and `request.content`, and read the response yourself.

## UI builder

### Entity types — `storekit.ui_types`

`WidgetType`, `ColorType` and `FontType` are `IntEnum`s with members
`DEFAULT` (0), `TYPE_1` … `TYPE_30` and a sentinel `MAX`; `BrushThemeType`
has `TYPE_1` … `TYPE_62`. `EntityTypeName(type_as_int, name)` gives a slot a
display name. `ThemeParameters` maps names to color, font and brush slots in
`colors`, `fonts` and `brushes`, with `clear()` and `is_empty()`.

### Themes and widget libraries — `storekit.ui_theme`

`Theme` holds `colors_map`, `fonts_map` and `brushes_map`;
`color_by_type`, `font_by_type` and `brush_by_type` return the assigned
value or `None`. `WidgetsLibrary.widget_by_type(widget_type)` returns the
widget class assigned to a slot, or `None`.

### Settings — `storekit.ui_settings`

`UIBuilderSettings` keeps `widget_types`, `color_types`, `font_types` and
`brush_types` (with default names such as `Button`, `Main`, `MainBold`,
`MainButtonInitial`), an `interface_theme` and a `widgets_library`.

- `update_theme(new_theme)` sets the theme and calls every subscriber with it.
- `subscribe(listener)` registers a listener and returns a function that
  removes it.
- `display_names(enum_type)` returns the visible members of one of the four
  enums with their names.

`load_type(enum_type, types)` does the same for any list of
`EntityTypeName`: the first member is shown as `"Default"`, other members
only when named, the last name for a slot wins, and out-of-range slots are
ignored.

```python
from storekit.ui_settings import UIBuilderSettings
from storekit.ui_types import FontType

settings = UIBuilderSettings()
print(settings.display_names(FontType))
# {<FontType.DEFAULT: 0>: 'Default', <FontType.TYPE_1: 1>: 'MainBold', <FontType.TYPE_2: 2>: 'MainRegular'}
```

### Widget wrapper — `storekit.generic_wrapper`

`GenericWrapper` has a `widget_library_type`, an optional `override_widget`,
`override_default_theme`, `theme`, `parameters`, optional `settings` and an
optional `on_theme_updated` callback, which is called with the wrapper
whenever the settings' theme changes.

- `widget_class()` returns the override widget if set, otherwise the widget
  for the slot from `settings.widgets_library`, otherwise `None`.
- `update_theme_parameters(parameters)` clears the current parameters when
  the new ones are empty, and replaces them when the current ones are empty
  or lack any of the new keys; otherwise it keeps them.

### Editing slot names — `storekit.entity_type_list`

`EntityTypeList(type_names, enum_type)` edits a configured list of
`EntityTypeName` in place.

- `refresh()` drops duplicate entries for a slot (keeping the last) and
  builds `items`: one per slot, sorted, slot 0 named `"Default"`, unnamed
  slots with `""`.
- `rename(type_as_int, new_name, confirm_delete=True)` renames a slot and
  commits. Names containing a space are ignored; clearing a name needs
  `confirm_delete` (a flag or a callable). Slot 0 cannot be renamed
  (`ValueError`). Returns whether a change was committed.
- `commit()` writes the named items back to the list, raising
  `DuplicateNameError` when two slots share a name (compared without regard
  to case).

`update_config` and `reload_types` may be set to callables run after a
commit or refresh. `name_error(text)` returns `"No white space is allowed"`
for text containing a space, otherwise `""`.