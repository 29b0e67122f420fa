"""JSON value entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsonNull:
    """The JSON ``null`` literal."""


@dataclass(frozen=True)
class JsonBoolean:
    """A JSON ``true``/``false`` literal."""

    value: bool


@dataclass(frozen=True)
class JsonNumber:
    """A JSON number, integral or not."""

    value: int | float


@dataclass(frozen=True)
class JsonString:
    """A JSON string."""

    value: str


@dataclass(frozen=True)
class JsonArray:
    """A JSON array with its elements in document order."""

    items: tuple[JsonValue, ...]


@dataclass(frozen=True)
class JsonObject:
    """A JSON object with its entries in document order."""

    entries: tuple[tuple[str, JsonValue], ...]

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.entries)


JsonValue = JsonNull | JsonBoolean | JsonNumber | JsonString | JsonArray | JsonObject
