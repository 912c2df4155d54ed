"""Builders for the HTTP requests of the player inventory API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import quote, urlencode

INVENTORY_VERSION = "4.0.0"
SDK_MODULE = "INVENTORY"

_STORE_API = "https://store.xsolla.com/api/v2/project/{ProjectID}"

Platform = Optional[Union[str, Enum]]


@dataclass(frozen=True)
class ApiRequest:
    """A fully described request to the store API."""

    method: str
    url: str
    auth_token: str = ""
    body: Optional[dict[str, Any]] = None
    sdk_module: str = SDK_MODULE
    sdk_version: str = INVENTORY_VERSION
    extra_headers: dict[str, str] = field(default_factory=dict)

    @property
    def content(self) -> str:
        """The body serialized as JSON, or an empty string when there is none."""
        if self.body is None:
            return ""
        return json.dumps(self.body, separators=(",", ":"))

    @property
    def headers(self) -> dict[str, str]:
        """Headers to send with the request."""
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        headers.update(self.extra_headers)
        return headers

    def with_token(self, auth_token: str) -> ApiRequest:
        """Return a copy of the request that carries another token."""
        return ApiRequest(
            method=self.method,
            url=self.url,
            auth_token=auth_token,
            body=self.body,
            sdk_module=self.sdk_module,
            sdk_version=self.sdk_version,
            extra_headers=dict(self.extra_headers),
        )


def _platform_name(platform: Platform) -> str:
    if platform is None:
        return ""
    if isinstance(platform, Enum):
        name = platform.name
        return "" if name == "undefined" else name
    return "" if platform == "undefined" else str(platform)


def _build_url(
    template: str,
    path_params: dict[str, str],
    number_params: Optional[list[tuple[str, int]]] = None,
    string_params: Optional[list[tuple[str, str]]] = None,
) -> str:
    url = template
    for name, value in path_params.items():
        url = url.replace("{" + name + "}", quote(str(value), safe=""))
    query: list[tuple[str, str]] = [(k, str(int(v))) for k, v in number_params or []]
    query.extend((k, v) for k, v in string_params or [] if v)
    if query:
        url = f"{url}?{urlencode(query)}"
    return url


def get_inventory_request(
    project_id: str,
    auth_token: str,
    platform: Platform = None,
    limit: int = 50,
    offset: int = 0,
) -> ApiRequest:
    """Request for a page of the user's inventory items."""
    url = _build_url(
        _STORE_API + "/user/inventory/items",
        {"ProjectID": project_id},
        [("offset", offset), ("limit", limit)],
        [("platform", _platform_name(platform))],
    )
    return ApiRequest("GET", url, auth_token)


def get_virtual_currency_balance_request(
    project_id: str, auth_token: str, platform: Platform = None
) -> ApiRequest:
    """Request for the user's virtual currency balance."""
    url = _build_url(
        _STORE_API + "/user/virtual_currency_balance",
        {"ProjectID": project_id},
        string_params=[("platform", _platform_name(platform))],
    )
    return ApiRequest("GET", url, auth_token)


def get_time_limited_items_request(
    project_id: str, auth_token: str, platform: Platform = None
) -> ApiRequest:
    """Request for the user's time-limited items."""
    url = _build_url(
        _STORE_API + "/user/time_limited_items",
        {"ProjectID": project_id},
        string_params=[("platform", _platform_name(platform))],
    )
    return ApiRequest("GET", url, auth_token)


def consume_item_request(
    project_id: str,
    auth_token: str,
    item_sku: str,
    quantity: int = 0,
    instance_id: str = "",
    platform: Platform = None,
) -> ApiRequest:
    """Request that consumes an inventory item.

    A zero quantity and an empty instance id are sent as JSON null.
    """
    body: dict[str, Any] = {
        "sku": item_sku,
        "quantity": None if quantity == 0 else quantity,
        "instance_id": instance_id or None,
    }
    url = _build_url(
        _STORE_API + "/user/inventory/item/consume",
        {"ProjectID": project_id},
        string_params=[("platform", _platform_name(platform))],
    )
    return ApiRequest("POST", url, auth_token, body)


def coupon_rewards_request(project_id: str, auth_token: str, coupon_code: str) -> ApiRequest:
    """Request for the rewards a coupon grants."""
    url = _build_url(
        _STORE_API + "/coupon/code/{CouponCode}/rewards",
        {"ProjectID": project_id, "CouponCode": coupon_code},
    )
    return ApiRequest("GET", url, auth_token)


def redeem_coupon_request(project_id: str, auth_token: str, coupon_code: str) -> ApiRequest:
    """Request that redeems a coupon."""
    url = _build_url(_STORE_API + "/coupon/redeem", {"ProjectID": project_id})
    return ApiRequest("POST", url, auth_token, {"coupon_code": coupon_code})