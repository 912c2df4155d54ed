"""Editing of the names given to entity type slots, as shown in a settings editor."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Any, Optional

from .ui_types import EntityTypeName

DEFAULT_NAME = "Default"
WHITESPACE_ERROR = "No white space is allowed"


class DuplicateNameError(ValueError):
    """Raised when two entity type slots are given the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate name found: {name!r}")
        self.name = name


def name_error(text: str) -> str:
    """Return the error shown for a name being typed, or an empty string if it is fine."""
    return WHITESPACE_ERROR if " " in text else ""


def _same_name(first: str, second: str) -> bool:
    return first.casefold() == second.casefold()


class EntityTypeList:
    """The editable list of every slot of an entity type enum with its name.

    ``type_names`` is the configured list; it is changed in place when edits
    are committed. Slot 0 is the fixed default and cannot be renamed.
    """

    def __init__(self, type_names: list[EntityTypeName], enum_type: type[IntEnum]) -> None:
        self.type_names = type_names
        self.enum_type = enum_type
        self.items: list[EntityTypeName] = []
        self.update_config: Optional[Callable[[], Any]] = None
        self.reload_types: Optional[Callable[[], Any]] = None

    @property
    def _slot_count(self) -> int:
        # The highest member is a sentinel, not a slot.
        return max(member.value for member in self.enum_type)

    def refresh(self) -> None:
        """Rebuild the items from the configured names.

        Duplicate entries for one slot are dropped from the configured list,
        keeping the last. Every slot gets exactly one item, sorted by slot;
        slots without a configured name get an empty one.
        """
        deduplicated: list[EntityTypeName] = []
        for position, entry in enumerate(self.type_names):
            later = self.type_names[position + 1 :]
            if not any(other.type_as_int == entry.type_as_int for other in later):
                deduplicated.append(entry)
        self.type_names[:] = deduplicated

        slot_count = self._slot_count
        by_slot: dict[int, EntityTypeName] = {0: EntityTypeName(0, DEFAULT_NAME)}
        for entry in self.type_names:
            if 0 < entry.type_as_int < slot_count:
                by_slot[entry.type_as_int] = EntityTypeName(entry.type_as_int, entry.name)
        for slot in range(slot_count):
            by_slot.setdefault(slot, EntityTypeName(slot, ""))

        self.items = sorted(by_slot.values(), key=lambda item: item.type_as_int)
        if self.reload_types is not None:
            self.reload_types()

    def _item(self, type_as_int: int) -> EntityTypeName:
        for item in self.items:
            if item.type_as_int == type_as_int:
                return item
        raise KeyError(type_as_int)

    def rename(self, type_as_int: int, new_name: str, confirm_delete: Any = True) -> bool:
        """Give a slot a new name and commit the change.

        Names with white space are ignored. Clearing an existing name needs
        ``confirm_delete``, a flag or a function returning one. Returns whether
        the change was committed. A name already used by another slot raises
        :class:`DuplicateNameError`; the item then keeps the new name but the
        configured list is left as it was.
        """
        if type_as_int == 0:
            raise ValueError("the default slot cannot be renamed")
        item = self._item(type_as_int)
        if " " in new_name:
            return False
        if item.name and not new_name:
            confirmed = confirm_delete() if callable(confirm_delete) else confirm_delete
            if not confirmed:
                return False
        if _same_name(item.name, new_name):
            return False
        item.name = new_name
        self.commit()
        return True

    def commit(self) -> None:
        """Write the named items back to the configured list.

        Raises :class:`DuplicateNameError` when two slots share a name.
        """
        named = [item for item in self.items[1:] if item.name]
        for position, item in enumerate(named):
            if any(_same_name(item.name, other.name) for other in named[position + 1 :]):
                raise DuplicateNameError(item.name)

        self.type_names[:] = [EntityTypeName(item.type_as_int, item.name) for item in named]
        if self.update_config is not None:
            self.update_config()
        if self.reload_types is not None:
            self.reload_types()