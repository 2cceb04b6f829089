"""
Synthetic order book snapshot generator.

Writes a header plus ``levels`` bids stepping down from the mid price and
``levels`` asks stepping up, one tick apart, with uniformly random sizes.
Output is in the same format the loader reads.
"""

import random
from pathlib import Path
from typing import Optional, Union

import structlog

from ..config.defaults import GeneratorParams
from ..errors import InvalidParameterError, SourceUnavailableError

logger = structlog.get_logger(__name__)

HEADER = "side,price,size"


def _validate_params(params: GeneratorParams) -> None:
    if params.levels < 1:
        raise InvalidParameterError(
            f"levels must be at least 1, got {params.levels}",
            parameter="levels", value=params.levels
        )
    # Prices are written with two decimals, so smaller ticks would collapse levels
    if params.tick_size < 0.01:
        raise InvalidParameterError(
            f"tick_size must be at least 0.01, got {params.tick_size}",
            parameter="tick_size", value=params.tick_size
        )
    if params.min_size < 0.01 or params.min_size > params.max_size:
        raise InvalidParameterError(
            f"Size range must satisfy 0.01 <= min_size <= max_size, got "
            f"[{params.min_size}, {params.max_size}]",
            parameter="min_size", value=params.min_size
        )
    deepest_bid = params.mid_price - params.levels * params.tick_size
    if round(deepest_bid, 2) <= 0:
        raise InvalidParameterError(
            f"mid_price {params.mid_price} is too low for {params.levels} levels "
            f"of {params.tick_size}: deepest bid would be {deepest_bid:.2f}",
            parameter="mid_price", value=params.mid_price
        )


def generate_orderbook_lines(params: Optional[GeneratorParams] = None,
                             rng: Optional[random.Random] = None) -> list[str]:
    """
    Generate snapshot lines, header first.

    Args:
        params: Generator parameters (defaults used if None)
        rng: Random source; pass a seeded Random for reproducible output

    Returns:
        Lines without trailing newlines

    Raises:
        InvalidParameterError: If the parameters cannot produce a valid book
    """
    params = params or GeneratorParams()
    rng = rng or random.Random()
    _validate_params(params)

    lines = [HEADER]

    for i in range(1, params.levels + 1):
        price = params.mid_price - i * params.tick_size
        size = rng.uniform(params.min_size, params.max_size)
        lines.append(f"bid,{price:.2f},{size:.2f}")

    for i in range(1, params.levels + 1):
        price = params.mid_price + i * params.tick_size
        size = rng.uniform(params.min_size, params.max_size)
        lines.append(f"ask,{price:.2f},{size:.2f}")

    return lines


def write_orderbook_csv(path: Union[str, Path, None] = None,
                        params: Optional[GeneratorParams] = None,
                        seed: Optional[int] = None) -> Path:
    """
    Generate a snapshot and write it to ``path``.

    Args:
        path: Destination file; defaults to ``params.filename``
        params: Generator parameters (defaults used if None)
        seed: Optional seed for reproducible sizes

    Returns:
        Path that was written

    Raises:
        InvalidParameterError: If the parameters cannot produce a valid book
        SourceUnavailableError: If the file cannot be written
    """
    params = params or GeneratorParams()
    path = Path(path if path is not None else params.filename)

    lines = generate_orderbook_lines(params, random.Random(seed))

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        raise SourceUnavailableError(
            f"Cannot open file for writing: '{path}'",
            source=str(path),
            context={"reason": str(e)}
        ) from e

    logger.info(
        "Generated order book snapshot",
        path=str(path),
        levels=params.levels,
        mid_price=params.mid_price
    )
    return path
