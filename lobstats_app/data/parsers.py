"""
Record parsers for converting raw delimited lines to typed orders.

Each record is ``side,price,size``. Fields are stripped of surrounding
whitespace before interpretation; side matching is case-insensitive and
resolved to the Side enum here so nothing downstream compares strings.
"""

import math
import re

from ..errors import EmptyFieldError, InvalidFieldError, UnknownSideError
from .models import Order, Side

# Plain ASCII decimal text, optionally signed, with an optional exponent.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SIDES = {"bid": Side.BID, "ask": Side.ASK}


def split_record(line: str, delimiter: str = ",") -> tuple[str, str, str]:
    """
    Split a raw line into trimmed side, price and size fields.

    Missing trailing fields come back as empty strings; anything after the
    third field is ignored.
    """
    parts = line.split(delimiter)
    parts += [""] * (3 - len(parts))
    side, price, size = (part.strip() for part in parts[:3])
    return side, price, size


def parse_side(raw: str) -> Side:
    """
    Resolve side text to a Side.

    Raises:
        UnknownSideError: If the text is not 'bid' or 'ask' in any case
    """
    side = _SIDES.get(raw.lower())
    if side is None:
        raise UnknownSideError(f"Unknown order side: '{raw}'", raw_side=raw)
    return side


def parse_positive_decimal(raw: str, field_name: str) -> float:
    """
    Parse decimal text that must be finite and strictly positive.

    Only plain ASCII decimal text is accepted, so digit separators like
    "1_000" and non-ASCII digits are rejected. Zero and negative values
    are rejected the same way as unparseable text.

    Raises:
        InvalidFieldError: If the text is not a finite number > 0
    """
    value = float(raw) if _DECIMAL.fullmatch(raw) else math.nan

    if not math.isfinite(value) or value <= 0.0:
        raise InvalidFieldError(
            f"Invalid value for field '{field_name}': '{raw}'",
            field_name=field_name,
            raw_value=raw
        )
    return value


def parse_record(line: str, line_number: int, delimiter: str = ",") -> Order:
    """
    Parse one record line into an Order.

    Args:
        line: Raw record text, without the header
        line_number: 1-based line number in the source, used in messages
        delimiter: Field delimiter

    Returns:
        Validated Order

    Raises:
        EmptyFieldError: If side, price or size is blank after trimming
        UnknownSideError: If side is not bid/ask
        InvalidFieldError: If price or size is not a finite number > 0
    """
    side_text, price_text, size_text = split_record(line, delimiter)

    if not side_text or not price_text or not size_text:
        raise EmptyFieldError(
            f"Line {line_number} has empty fields.",
            line_number=line_number
        )

    try:
        return Order(
            side=parse_side(side_text),
            price=parse_positive_decimal(price_text, "price"),
            size=parse_positive_decimal(size_text, "size"),
        )
    except (UnknownSideError, InvalidFieldError) as e:
        e.context.setdefault("line_number", line_number)
        raise
