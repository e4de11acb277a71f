"""
WebSocket stream payload models for bpx client.

Stream payloads use short field aliases (``e`` event type, ``E`` event
time, ``s`` symbol, ``T`` engine timestamp, ...). The meaning of an alias
depends on the stream, so every update type declares its own alias table.
Only payload decoding lives here; connection handling belongs to the caller.
"""

import json
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar, Union

from ..errors import DecodeError
from .enums import PositionUpdateType, StreamEventType
from .fields import FieldReader

U = TypeVar("U", bound="StreamUpdate")

# (alias, attribute, reader)
AliasTable = Tuple[Tuple[str, str, Callable[[FieldReader, str], Any]], ...]

_str = FieldReader.string
_int = FieldReader.integer
_dec = FieldReader.decimal
_opt_dec = FieldReader.opt_decimal
_bool = FieldReader.boolean
_ts = FieldReader.timestamp
_levels = FieldReader.decimal_pairs


def _position_event(reader: FieldReader, key: str) -> Optional[PositionUpdateType]:
    return reader.opt_enum(key, PositionUpdateType)


class StreamUpdate:
    """Base for stream payloads decoded through an alias table."""

    FIELDS: ClassVar[AliasTable] = ()

    @classmethod
    def aliases(cls) -> Dict[str, str]:
        """Alias to attribute mapping for this stream."""
        return {alias: attribute for alias, attribute, _ in cls.FIELDS}

    @classmethod
    def from_dict(cls: Type[U], data: Dict[str, Any]) -> U:
        r = FieldReader(data, cls.__name__)
        return cls(**{attribute: read(r, alias) for alias, attribute, read in cls.FIELDS})


@dataclass(frozen=True)
class TickerUpdate(StreamUpdate):
    """Best bid/offer change (``bookTicker`` stream)."""
    event_type: str
    event_time: int  # microseconds
    symbol: str
    ask_price: Decimal
    ask_quantity: Decimal
    bid_price: Decimal
    bid_quantity: Decimal
    update_id: int
    timestamp: int  # engine, microseconds

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("a", "ask_price", _dec),
        ("A", "ask_quantity", _dec),
        ("b", "bid_price", _dec),
        ("B", "bid_quantity", _dec),
        ("u", "update_id", _int),
        ("T", "timestamp", _int),
    )


@dataclass(frozen=True)
class TickerStatisticsUpdate(StreamUpdate):
    """24h rolling statistics, pushed every second (``ticker`` stream)."""
    event_type: str
    event_time: int
    symbol: str
    first_price: Decimal
    last_price: Decimal
    high_price: Decimal
    low_price: Decimal
    base_asset_volume: Decimal
    quote_asset_volume: Decimal
    number_of_trades: int

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("o", "first_price", _dec),
        ("c", "last_price", _dec),
        ("h", "high_price", _dec),
        ("l", "low_price", _dec),
        ("v", "base_asset_volume", _dec),
        ("V", "quote_asset_volume", _dec),
        ("n", "number_of_trades", _int),
    )


@dataclass(frozen=True)
class OrderBookDepthUpdate(StreamUpdate):
    """Incremental order book change (``depth`` stream)."""
    event_type: str
    event_time: int
    symbol: str
    timestamp: int
    first_update_id: int
    last_update_id: int
    asks: List[Tuple[Decimal, Decimal]]
    bids: List[Tuple[Decimal, Decimal]]

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("T", "timestamp", _int),
        ("U", "first_update_id", _int),
        ("u", "last_update_id", _int),
        ("a", "asks", _levels),
        ("b", "bids", _levels),
    )


@dataclass(frozen=True)
class KlineUpdate(StreamUpdate):
    """Candlestick update (``kline`` stream). ``T`` is the close time here."""
    event_type: str
    event_time: int
    symbol: str
    start: datetime
    end: datetime
    open: Decimal
    close: Decimal
    high: Decimal
    low: Decimal
    base_asset_volume: Decimal
    number_of_trades: int
    is_closed: bool

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("t", "start", _ts),
        ("T", "end", _ts),
        ("o", "open", _dec),
        ("c", "close", _dec),
        ("h", "high", _dec),
        ("l", "low", _dec),
        ("v", "base_asset_volume", _dec),
        ("n", "number_of_trades", _int),
        ("X", "is_closed", _bool),
    )


@dataclass(frozen=True)
class MarkPriceUpdate(StreamUpdate):
    """Mark price, index price and estimated funding (``markPrice`` stream)."""
    event_type: str
    event_time: int
    symbol: str
    mark_price: Decimal
    funding_rate: Decimal
    index_price: Decimal
    funding_timestamp: int
    engine_timestamp: int

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("p", "mark_price", _dec),
        ("f", "funding_rate", _dec),
        ("i", "index_price", _dec),
        ("n", "funding_timestamp", _int),
        ("T", "engine_timestamp", _int),
    )


@dataclass(frozen=True)
class OpenInterestUpdate(StreamUpdate):
    """Open interest in contracts, pushed every 60 seconds."""
    event_type: str
    event_time: int
    symbol: str
    open_interest: Decimal

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _str),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("o", "open_interest", _dec),
    )


@dataclass(frozen=True)
class PositionUpdate(StreamUpdate):
    """Futures position change on the private position stream."""
    event_type: Optional[PositionUpdateType]
    event_time: int
    symbol: str
    break_even_price: Decimal
    entry_price: Decimal
    imf: Decimal
    mark_price: Decimal
    mmf: Decimal
    net_quantity: Decimal
    net_exposure_quantity: Decimal
    net_exposure_notional: Decimal
    position_id: int
    pnl_realized: Decimal
    pnl_unrealized: Decimal
    timestamp: int
    est_liquidation_price: Optional[Decimal] = None  # deprecated upstream

    FIELDS: ClassVar[AliasTable] = (
        ("e", "event_type", _position_event),
        ("E", "event_time", _int),
        ("s", "symbol", _str),
        ("b", "break_even_price", _dec),
        ("B", "entry_price", _dec),
        ("f", "imf", _dec),
        ("M", "mark_price", _dec),
        ("m", "mmf", _dec),
        ("q", "net_quantity", _dec),
        ("Q", "net_exposure_quantity", _dec),
        ("n", "net_exposure_notional", _dec),
        ("i", "position_id", _int),
        ("p", "pnl_realized", _dec),
        ("P", "pnl_unrealized", _dec),
        ("T", "timestamp", _int),
        ("l", "est_liquidation_price", _opt_dec),
    )


STREAM_DECODERS: Dict[StreamEventType, Type[StreamUpdate]] = {
    StreamEventType.BOOK_TICKER: TickerUpdate,
    StreamEventType.TICKER: TickerStatisticsUpdate,
    StreamEventType.DEPTH: OrderBookDepthUpdate,
    StreamEventType.KLINE: KlineUpdate,
    StreamEventType.MARK_PRICE: MarkPriceUpdate,
    StreamEventType.OPEN_INTEREST: OpenInterestUpdate,
    StreamEventType.POSITION_ADJUSTED: PositionUpdate,
    StreamEventType.POSITION_OPENED: PositionUpdate,
    StreamEventType.POSITION_CLOSED: PositionUpdate,
}


def parse_stream_payload(payload: Union[str, bytes, Dict[str, Any]]) -> Dict[str, Any]:
    """Parse a raw stream message and unwrap the ``{"stream", "data"}`` envelope."""
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload, parse_float=Decimal)
        except ValueError as e:
            raise DecodeError(f"invalid JSON stream payload: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(f"expected JSON object, got {type(payload).__name__}")

    if "stream" in payload and isinstance(payload.get("data"), dict):
        return payload["data"]
    return payload


def decode_stream_event(payload: Union[str, bytes, Dict[str, Any]]) -> StreamUpdate:
    """
    Decode a stream message into its typed update.

    Args:
        payload: Raw message text/bytes or an already-parsed JSON object

    Returns:
        Update instance chosen by the payload's ``e`` field

    Raises:
        UnknownVariant: If the event type is not a known stream event
        DecodeError: If the payload does not match the stream's schema
    """
    data = parse_stream_payload(payload)
    event_type = StreamEventType.decode(data.get("e"), field="e")
    return STREAM_DECODERS[event_type].from_dict(data)
