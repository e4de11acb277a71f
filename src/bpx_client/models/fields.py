"""
Typed field access for decoding JSON objects into models.

Each accessor names the wire key it reads, so a schema mismatch surfaces
with the entity and offending field attached.
"""

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from ..decimals import to_decimal
from ..errors import DecodeError
from .enums import WireEnum

E = TypeVar("E", bound=WireEnum)
T = TypeVar("T")

_INTEGER_TEXT = re.compile(r"-?[0-9]+")


class FieldReader:
    """Reads typed values out of one decoded JSON object."""

    def __init__(self, data: Any, entity: str):
        if not isinstance(data, dict):
            raise DecodeError(
                f"expected JSON object, got {type(data).__name__}", entity=entity
            )
        self._data: Dict[str, Any] = data
        self._entity = entity

    def _required(self, key: str) -> Any:
        value = self._data.get(key)
        if value is None:
            raise DecodeError("missing required field", self._entity, key)
        return value

    def _fail(self, key: str, expected: str, value: Any) -> DecodeError:
        return DecodeError(
            f"expected {expected}, got {type(value).__name__} {value!r}",
            self._entity,
            key,
        )

    def has(self, key: str) -> bool:
        return self._data.get(key) is not None

    # Scalars

    def string(self, key: str) -> str:
        value = self._required(key)
        if not isinstance(value, str):
            raise self._fail(key, "string", value)
        return value

    def opt_string(self, key: str) -> Optional[str]:
        return self.string(key) if self.has(key) else None

    def decimal(self, key: str) -> Decimal:
        return to_decimal(self._required(key), field=key)

    def opt_decimal(self, key: str) -> Optional[Decimal]:
        return self.decimal(key) if self.has(key) else None

    def integer(self, key: str) -> int:
        value = self._required(key)
        if isinstance(value, bool):
            raise self._fail(key, "integer", value)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INTEGER_TEXT.fullmatch(value):
            return int(value)
        raise self._fail(key, "integer", value)

    def opt_integer(self, key: str) -> Optional[int]:
        return self.integer(key) if self.has(key) else None

    def boolean(self, key: str) -> bool:
        value = self._required(key)
        if not isinstance(value, bool):
            raise self._fail(key, "boolean", value)
        return value

    def opt_boolean(self, key: str) -> Optional[bool]:
        return self.boolean(key) if self.has(key) else None

    def enum(self, key: str, enum_cls: Type[E]) -> E:
        return enum_cls.decode(self._required(key), field=key)

    def opt_enum(self, key: str, enum_cls: Type[E]) -> Optional[E]:
        return self.enum(key, enum_cls) if self.has(key) else None

    def timestamp(self, key: str) -> datetime:
        """ISO-8601 text, or epoch seconds, as a datetime.

        Naive text stays naive; text with an offset (or ``Z``) is aware.
        Epoch seconds decode to a naive UTC datetime.
        """
        value = self._required(key)
        if isinstance(value, str) and not _INTEGER_TEXT.fullmatch(value):
            text = value[:-1] + "+00:00" if value.endswith("Z") else value
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                raise self._fail(key, "ISO-8601 timestamp", value) from None
        seconds = self.integer(key)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            raise self._fail(key, "epoch seconds", value) from None

    # Composites

    def nested(self, key: str, model: Type[T]) -> T:
        return model.from_dict(self._required(key))

    def opt_nested(self, key: str, model: Type[T]) -> Optional[T]:
        return self.nested(key, model) if self.has(key) else None

    def list_of(self, key: str, model: Type[T]) -> List[T]:
        value = self._required(key)
        if not isinstance(value, list):
            raise self._fail(key, "array", value)
        return [model.from_dict(item) for item in value]

    def decimal_pairs(self, key: str) -> List[Tuple[Decimal, Decimal]]:
        """Array of ``[price, quantity]`` pairs, order preserved."""
        value = self._required(key)
        if not isinstance(value, list):
            raise self._fail(key, "array", value)

        pairs = []
        for level in value:
            if not isinstance(level, (list, tuple)) or len(level) != 2:
                raise self._fail(key, "[price, quantity] pair", level)
            pairs.append((to_decimal(level[0], field=key), to_decimal(level[1], field=key)))
        return pairs
