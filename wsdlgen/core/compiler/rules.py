"""
Argument rules — how a single option becomes command-line arguments.

A compiler is an ordered table of rules. Each rule reads the resolved
option snapshot of a config and returns the arguments it contributes,
possibly none. Rules never raise for well-typed values; conflicts are
reported through the ``warn`` callable and resolved deterministically.

Emission conventions:
    - booleans contribute a flag only when true
    - strings contribute ``flag value`` only when non-empty
    - forced flags are always present
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol

Values = Mapping[str, Any]
Warn = Callable[[str], None]


def as_text(value: Any) -> str:
    """String form of an option value; None counts as empty."""
    if value is None:
        return ""
    return str(value)


class Rule(Protocol):
    def emit(self, values: Values, warn: Warn) -> list[str]: ...


@dataclass(frozen=True)
class Positional:
    """The option value as a bare argument (if non-empty)."""

    option: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        text = as_text(values[self.option])
        return [text] if text else []


@dataclass(frozen=True)
class Attribute:
    """``flag value`` pair, only for non-empty values."""

    flag: str
    option: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        text = as_text(values[self.option])
        return [self.flag, text] if text else []


@dataclass(frozen=True)
class Constant:
    """``flag value`` pair with a fixed value."""

    flag: str
    value: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        return [self.flag, self.value]


@dataclass(frozen=True)
class Flag:
    """Boolean flag.

    Set when the option is true, or when any option in ``implied_by``
    is truthy. ``when`` gates the flag on other values; a flag whose
    gate is closed is dropped without a warning.
    """

    flag: str
    option: str
    implied_by: tuple[str, ...] = ()
    when: Callable[[Values], bool] | None = None

    def emit(self, values: Values, warn: Warn) -> list[str]:
        if self.when is not None and not self.when(values):
            return []
        if values[self.option] or any(values[name] for name in self.implied_by):
            return [self.flag]
        return []


@dataclass(frozen=True)
class Forced:
    """Flag that is always present."""

    flag: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        return [self.flag]


@dataclass(frozen=True)
class Exclusive:
    """Two mutually exclusive boolean flags.

    ``preferred`` wins when both are set; ``other`` is then dropped and
    ``message`` (formatted with the config name) is reported once.
    """

    preferred: Flag
    other: Flag
    message: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        preferred = self.preferred.emit(values, warn)
        if not preferred:
            return self.other.emit(values, warn)
        if self.other.emit(values, warn):
            warn(self.message.format(name=values.get("name", "")))
        return preferred


@dataclass(frozen=True)
class JoinedMapping:
    """All ``key=value`` entries of a mapping joined with commas."""

    flag: str
    option: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        entries = values[self.option]
        if not entries:
            return []
        return [self.flag, ",".join(f"{key}={value}" for key, value in entries)]


@dataclass(frozen=True)
class Pairs:
    """One ``flag key=value`` pair per entry."""

    flag: str
    option: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        args: list[str] = []
        for key, value in values[self.option]:
            args += [self.flag, f"{key}={value}"]
        return args


@dataclass(frozen=True)
class Passthrough:
    """Free-form arguments, appended verbatim."""

    option: str

    def emit(self, values: Values, warn: Warn) -> list[str]:
        return [str(arg) for arg in values[self.option]]
