"""
Providers and properties — deferred, defaulted option values.

A generator option is backed by a ``Property``. The property holds a
``Provider``: either a constant wrapped at assignment time, or a
deferred computation that is only evaluated when the value is read.
This lets build configuration bind an option to something that is not
known yet (an output root resolved later, another task's result)
without forcing early evaluation.

Options are declared on a ``Configurable`` subclass with the ``Option``
descriptor:

    class MyConfig(Configurable):
        timeout = Option(240)

    cfg = MyConfig()
    cfg.timeout                 # 240, resolved on read
    cfg.timeout = Provider(lambda: compute_timeout())
    cfg.provider("timeout")     # live view, follows reassignment
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Provider(Generic[T]):
    """A value computed when it is read.

    The supplier runs on every ``get()``. Nothing is cached, so a
    provider always reflects the current state of whatever it reads.
    """

    def __init__(self, supplier: Callable[[], T]):
        self._supplier = supplier

    @classmethod
    def of(cls, value: T) -> Provider[T]:
        """Wrap a constant."""
        return cls(lambda: value)

    def get(self) -> T:
        return self._supplier()

    def map(self, transform: Callable[[T], R]) -> Provider[R]:
        """Return a provider that applies ``transform`` to this one's value."""
        return Provider(lambda: transform(self.get()))

    def __repr__(self) -> str:
        return f"<Provider {self._supplier!r}>"


class Property(Generic[T]):
    """Mutable holder of a single provider.

    ``set()`` replaces the held provider. A later assignment always
    wins; nothing reverts to an earlier (for example derived) value.
    """

    def __init__(self, default: T | Provider[T], convert: Callable[[Any], T] | None = None):
        self._convert = convert
        self._provider: Provider[T]
        self.set(default)

    def set(self, value: T | Provider[T]) -> None:
        if isinstance(value, Provider):
            self._provider = value
            return
        if self._convert is not None and value is not None:
            value = self._convert(value)
        self._provider = Provider.of(value)

    def get(self) -> T:
        return self._provider.get()

    @property
    def provider(self) -> Provider[T]:
        """Live view of this property, following later ``set()`` calls."""
        return Provider(self.get)

    def __repr__(self) -> str:
        return f"<Property {self._provider!r}>"


class Option(Generic[T]):
    """Class-level declaration of a defaulted option.

    Reading the attribute resolves the backing property. Assigning
    stores a value, or binds a ``Provider`` without evaluating it.
    """

    def __init__(self, default: T, convert: Callable[[Any], T] | None = None, doc: str = ""):
        self.default = default
        self.convert = convert
        self.name = ""
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Configurable | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._properties[self.name].get()

    def __set__(self, instance: Configurable, value: T | Provider[T]) -> None:
        instance._properties[self.name].set(value)

    def __repr__(self) -> str:
        return f"<Option {self.name}={self.default!r}>"


class Configurable:
    """Base class for objects made of ``Option`` declarations.

    Every declared option is seeded with its default at construction,
    so no option is ever observed unset.
    """

    def __init__(self) -> None:
        self._properties: dict[str, Property[Any]] = {
            name: Property(opt.default, opt.convert)
            for name, opt in self.declared_options().items()
        }

    @classmethod
    def declared_options(cls) -> dict[str, Option[Any]]:
        """All options of this class, base classes first, in declaration order."""
        options: dict[str, Option[Any]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, Option):
                    options[name] = value
        return options

    def option_names(self) -> list[str]:
        return list(self._properties)

    def provider(self, name: str) -> Provider[Any]:
        """Deferred view of an option."""
        try:
            return self._properties[name].provider
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no option '{name}'") from None

    def configure(self, **values: Any) -> None:
        """Assign several options at once.

        Raises:
            AttributeError: If a name is not a declared option.
        """
        unknown = sorted(set(values) - set(self._properties))
        if unknown:
            raise AttributeError(
                f"{type(self).__name__} has no option(s): {', '.join(unknown)}"
            )
        for name, value in values.items():
            setattr(self, name, value)

    def resolve(self) -> dict[str, Any]:
        """Snapshot every option, evaluating each provider exactly once."""
        return {name: prop.get() for name, prop in self._properties.items()}
