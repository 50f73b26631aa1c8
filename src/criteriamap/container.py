# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Insertion-ordered string-keyed container with predicate-gated operations.

CriteriaMap wraps a private dict and exposes the usual mapping operations
alongside conditional ones: ``put_if`` stores a value only when every predicate
accepts it, ``get_if`` returns it only when the predicates pass, and
``if_present`` runs an action against a stored value. None is never accepted as
a key, while None values are stored as-is.
"""

from __future__ import annotations

import logging
from collections.abc import (
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import Any, ClassVar, Generic, TypeVar

from .config import CriteriaSettings, load_settings
from .errors import InvalidArgumentError, TypeMismatchError, require_not_none
from .optional import OptionalValue
from .predicates import IS_NOT_NULL, IS_NULL, Predicate, require_predicates, test_all

logger = logging.getLogger(__name__)

V = TypeVar("V")

_MISSING: Any = object()


def _reject_null_keys(mapping: Mapping[Any, Any]) -> None:
    if any(key is None for key in mapping):
        raise InvalidArgumentError("CriteriaMap cannot contain None keys")


class CriteriaMap(MutableMapping[str, V], Generic[V]):
    """Ordered mapping of names to values with conditional insert and lookup."""

    NULL: ClassVar[Predicate] = IS_NULL
    NOT_NULL: ClassVar[Predicate] = IS_NOT_NULL

    def __init__(self, *, settings: CriteriaSettings | None = None):
        self.settings = settings or load_settings()
        self._entries: dict[str, V] = {}

    @classmethod
    def create(cls, *, settings: CriteriaSettings | None = None) -> CriteriaMap[V]:
        return cls(settings=settings)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, V] | None,
        *,
        settings: CriteriaSettings | None = None,
    ) -> CriteriaMap[V]:
        """
        Create a container holding a copy of ``mapping``.

        Raises InvalidArgumentError if ``mapping`` is None or contains a None key.
        """
        require_not_none(mapping, "mapping")
        _reject_null_keys(mapping)
        container: CriteriaMap[V] = cls(settings=settings)
        container._entries.update(mapping)
        return container

    # Standard mapping operations

    def size(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def contains_key(self, key: str) -> bool:
        require_not_none(key, "key")
        return key in self._entries

    def contains_value(self, value: Any) -> bool:
        return value in self._entries.values()

    def get(self, key: str, default: V | None = None) -> V | None:
        """Return the stored value, or ``default`` if absent. A stored None is returned as None."""
        require_not_none(key, "key")
        return self._entries.get(key, default)

    def put(self, key: str, value: V) -> V | None:
        """Store ``value`` under ``key`` and return the value it replaced, if any."""
        require_not_none(key, "key")
        previous = self._entries.get(key)
        self._entries[key] = value
        return previous

    def remove(self, key: str) -> V | None:
        require_not_none(key, "key")
        return self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> KeysView[str]:
        return self._entries.keys()

    def values(self) -> ValuesView[V]:
        return self._entries.values()

    def items(self) -> ItemsView[str, V]:
        return self._entries.items()

    entries = items

    def put_all(self, mapping: Mapping[str, V] | None) -> None:
        """
        Merge every entry of ``mapping`` into this container.

        None keys are checked before anything is written, so a rejected merge
        leaves the container untouched.
        """
        require_not_none(mapping, "mapping")
        _reject_null_keys(mapping)
        self._entries.update(mapping)
        logger.debug("Merged %d entries (size now %d)", len(mapping), len(self._entries))

    # Conditional operations

    def has(self, key: str) -> bool:
        return self.contains_key(key)

    def if_present(
        self,
        key: str | None,
        action: Callable[[V], Any],
        predicate: Predicate | None = _MISSING,
        *,
        expected_type: type | None = None,
    ) -> bool:
        """
        Call ``action`` with the value stored under ``key`` and return True.

        Without ``predicate`` the key is not None-checked; a None key is simply
        absent and the call returns False. With ``predicate`` the key, action
        and predicate are all required, and the action only runs when the
        stored value satisfies the predicate.
        """
        if predicate is _MISSING:
            require_not_none(action, "action")
            if key not in self._entries:
                return False
            action(self._entries[key])
            return True

        require_not_none(key, "key")
        require_not_none(action, "action")
        require_not_none(predicate, "predicate")
        if not self.has(key):  # type: ignore[arg-type]
            return False
        value = self._narrow(key, self._entries[key], expected_type)  # type: ignore[index]
        if not test_all(value, (predicate,)):
            return False
        action(value)
        return True

    if_has = if_present

    def put_if(self, key: str, value: V, *predicates: Predicate | None) -> bool:
        """
        Store ``value`` only if every predicate accepts it.

        All predicates are checked for None before any is evaluated.
        """
        require_predicates(predicates)
        if not test_all(value, predicates):
            if self.settings.log_rejections:
                logger.debug("put_if rejected value for key %r", key)
            return False
        self.put(key, value)
        return True

    def put_all_if(self, mapping: Mapping[str, V] | None, *predicates: Predicate | None) -> int:
        """
        Store each entry of ``mapping`` whose value passes every predicate.

        Entries are judged independently; rejected ones are skipped silently.
        Returns the number of entries stored.
        """
        require_not_none(mapping, "mapping")
        require_predicates(predicates)
        _reject_null_keys(mapping)
        stored = 0
        for key, value in mapping.items():
            if test_all(value, predicates):
                self._entries[key] = value
                stored += 1
            elif self.settings.log_rejections:
                logger.debug("put_all_if rejected value for key %r", key)
        logger.debug("put_all_if stored %d of %d entries", stored, len(mapping))
        return stored

    def get_optional(self, key: str | None) -> OptionalValue[V]:
        """Return the stored value wrapped in an optional; None values and absent keys give an empty one."""
        return OptionalValue.of_nullable(self._entries.get(key))  # type: ignore[arg-type]

    def get_if(
        self,
        key: str,
        *predicates: Predicate | None,
        expected_type: type | None = None,
    ) -> OptionalValue[V]:
        """
        Return the stored value if the key exists and the value passes every predicate.

        The result is present even when the stored value is None, as long as
        the predicates accepted it.
        """
        if not self.has(key):
            return OptionalValue.empty()
        value = self._narrow(key, self._entries[key], expected_type)
        if test_all(value, predicates):
            return OptionalValue.of(value)
        return OptionalValue.empty()

    def _narrow(self, key: str, value: V, expected_type: type | None) -> V:
        if expected_type is None or value is None or isinstance(value, expected_type):
            return value
        logger.debug("Value for key %r is %s, not %s", key, type(value).__name__, expected_type.__name__)
        raise TypeMismatchError(
            f"Value for key {key!r} is {type(value).__name__}, expected {expected_type.__name__}"
        )

    # MutableMapping protocol

    def __getitem__(self, key: str) -> V:
        require_not_none(key, "key")
        return self._entries[key]

    def __setitem__(self, key: str, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        require_not_none(key, "key")
        del self._entries[key]

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def update(self, other: Mapping[str, V] | Iterable[tuple[str, V]] = (), /, **kwargs: V) -> None:
        require_not_none(other, "mapping")
        merged = dict(other, **kwargs)
        self.put_all(merged)

    def __repr__(self) -> str:
        limit = self.settings.repr_limit
        shown = ", ".join(f"{key!r}: {value!r}" for key, value in list(self._entries.items())[:limit])
        if len(self._entries) > limit:
            shown += f", ... ({len(self._entries) - limit} more)"
        return f"{type(self).__name__}({{{shown}}})"


CriteriaContainer = CriteriaMap


__all__ = ["CriteriaContainer", "CriteriaMap"]
