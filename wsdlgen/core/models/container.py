"""
Named container — an ordered collection of uniquely named objects.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class NamedContainer(Generic[T]):
    """Order-preserving collection keyed by a unique name.

    Objects are built by ``factory(name)``; extra keyword arguments to
    ``create`` are assigned as attributes on the new object.
    """

    def __init__(self, factory: Callable[[str], T]):
        self._factory = factory
        self._items: dict[str, T] = {}

    def create(self, name: str, **attrs: Any) -> T:
        """Create and register a new object.

        Raises:
            ValueError: If an object with this name already exists.
        """
        self._check_unique(name)
        item = self._factory(name)
        for key, value in attrs.items():
            setattr(item, key, value)
        return self.add(name, item)

    def build(self, name: str) -> T:
        """Build an object with the factory without registering it."""
        self._check_unique(name)
        return self._factory(name)

    def add(self, name: str, item: T) -> T:
        """Register an object built elsewhere under ``name``."""
        self._check_unique(name)
        self._items[name] = item
        return item

    def _check_unique(self, name: str) -> None:
        if name in self._items:
            raise ValueError(f"Duplicate name: '{name}'")

    def maybe_create(self, name: str) -> T:
        """Return the existing object with this name, or create it."""
        if name in self._items:
            return self._items[name]
        return self.create(name)

    def get(self, name: str) -> T | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items)

    def __getitem__(self, name: str) -> T:
        return self._items[name]

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"<NamedContainer {self.names()!r}>"
