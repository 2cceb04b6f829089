"""
Order book loader.

Drains a complete text source, parses every record, and assembles a
validated OrderBook. Loading is all-or-nothing: the first bad record, an
empty side or a crossed book aborts with a typed error and no book.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

import structlog

from ..config.defaults import LoaderParams
from ..errors import CrossedBookError, EmptySideError, SourceUnavailableError
from .models import Order, OrderBook, Side
from .parsers import parse_record

logger = structlog.get_logger(__name__)


def load_book(lines: Iterable[str], params: Optional[LoaderParams] = None) -> OrderBook:
    """
    Build an OrderBook from an iterable of raw lines.

    The first line is discarded as a header when ``params.skip_header`` is
    set (the default), whatever it contains. Blank lines are skipped but
    still count towards line numbers in error messages.

    Args:
        lines: Source lines, header first
        params: Loader parameters (defaults used if None)

    Returns:
        Validated, immutable OrderBook

    Raises:
        EmptyFieldError, UnknownSideError, InvalidFieldError: On a bad record
        EmptySideError: If either side has no orders
        CrossedBookError: If best bid >= best ask
    """
    params = params or LoaderParams()

    bids: list[Order] = []
    asks: list[Order] = []

    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 and params.skip_header:
            continue
        if not line.strip():
            continue

        order = parse_record(line, line_number, params.delimiter)
        if order.side is Side.BID:
            bids.append(order)
        else:
            asks.append(order)

    if not bids:
        raise EmptySideError("No bids found in file.", side=Side.BID.value)
    if not asks:
        raise EmptySideError("No asks found in file.", side=Side.ASK.value)

    # list.sort is stable (also with reverse=True): equal prices keep file order
    bids.sort(key=lambda order: order.price, reverse=True)
    asks.sort(key=lambda order: order.price)

    best_bid, best_ask = bids[0].price, asks[0].price
    if best_bid >= best_ask:
        raise CrossedBookError(
            f"Crossed book: best bid ({best_bid}) >= best ask ({best_ask}).",
            best_bid=best_bid,
            best_ask=best_ask
        )

    book = OrderBook(bids=tuple(bids), asks=tuple(asks))
    logger.debug(
        "Order book loaded",
        bid_count=len(book.bids),
        ask_count=len(book.asks),
        best_bid=best_bid,
        best_ask=best_ask
    )
    return book


def load_book_from_text(text: str, params: Optional[LoaderParams] = None) -> OrderBook:
    """
    Build an OrderBook from the full text of a snapshot.

    Lines break at "\n" only, so form feeds or Unicode separators inside a
    record stay part of that record and line numbers match the source.
    """
    return load_book(text.split("\n"), params)


def load_book_from_path(path: Union[str, Path], params: Optional[LoaderParams] = None) -> OrderBook:
    """
    Read a snapshot file and build an OrderBook.

    The file is read completely and closed before any record is parsed.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(
            f"Cannot open file: '{path}'",
            source=str(path),
            context={"reason": str(e)}
        ) from e

    logger.debug("Snapshot read", source=str(path), size_bytes=len(text))
    return load_book_from_text(text, params)
