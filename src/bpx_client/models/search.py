"""
Base structure for history search parameters.

Every field is optional and unset by default. Declared field order is the
order parameters appear on the wire. ``limit`` and ``offset`` defaults are
applied only when decoding a structure with ``from_dict``; the encoder
never emits a value the caller did not set.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from ..constants import DEFAULT_LIMIT, DEFAULT_OFFSET
from ..query import encode_query
from .enums import WireEnum
from .fields import FieldReader

P = TypeVar("P", bound="SearchParams")


def search_field(kind: type, wire: Optional[str] = None) -> Any:
    """Declare an optional search parameter.

    Args:
        kind: ``str``, ``int`` or a ``WireEnum`` subclass
        wire: Query key when it differs from the attribute name
    """
    return field(default=None, metadata={"kind": kind, "wire": wire})


def _wire_key(f) -> str:
    return f.metadata.get("wire") or f.name


@dataclass
class SearchParams:
    """Sparse set of optional filters for a history endpoint."""

    def query_pairs(self) -> List[Tuple[str, Any]]:
        """``(query key, value)`` for every declared field, in order."""
        return [(_wire_key(f), getattr(self, f.name)) for f in fields(self)]

    def to_query(self) -> str:
        """Query string holding exactly the fields the caller set."""
        return encode_query(self.query_pairs())

    @property
    def effective_limit(self) -> int:
        limit = getattr(self, "limit", None)
        return DEFAULT_LIMIT if limit is None else limit

    @property
    def effective_offset(self) -> int:
        offset = getattr(self, "offset", None)
        return DEFAULT_OFFSET if offset is None else offset

    @classmethod
    def from_dict(cls: Type[P], data: Dict[str, Any]) -> P:
        """Decode search parameters keyed by query key, applying defaults.

        A missing ``limit`` decodes as 100 and a missing ``offset`` as 0.
        """
        r = FieldReader(data, cls.__name__)
        values: Dict[str, Any] = {}
        for f in fields(cls):
            key = _wire_key(f)
            kind = f.metadata["kind"]
            if isinstance(kind, type) and issubclass(kind, WireEnum):
                values[f.name] = r.opt_enum(key, kind)
            elif kind is int:
                values[f.name] = r.opt_integer(key)
            else:
                values[f.name] = r.opt_string(key)

        if "limit" in values and values["limit"] is None:
            values["limit"] = DEFAULT_LIMIT
        if "offset" in values and values["offset"] is None:
            values["offset"] = DEFAULT_OFFSET
        return cls(**values)
