"""Text and JSON renderings of a Stats snapshot."""

import json

from ..models.metrics import Stats

_RULE = "=" * 44
_THIN_RULE = "-" * 44


def format_text_report(stats: Stats, depth_pct: float, target_qty: float) -> str:
    """
    Render the console analysis report.

    All numbers are shown with four decimals.
    """
    lines = [
        "",
        _RULE,
        "         ORDERBOOK ANALYSIS",
        _RULE,
        f"  Best Bid    : {stats.best_bid:.4f}",
        f"  Best Ask    : {stats.best_ask:.4f}",
        f"  Mid Price   : {stats.mid_price:.4f}",
        f"  Spread      : {stats.spread:.4f}  ({stats.spread_pct:.4f}%)",
        _THIN_RULE,
        f"  Depth (±{depth_pct:.4f}% from mid):",
        f"    Bids : {stats.bid_depth:.4f} units",
        f"    Asks : {stats.ask_depth:.4f} units",
        f"    Imbalance : {stats.depth_imbalance:+.4f}",
        _THIN_RULE,
        f"  VWAP (qty = {target_qty:.4f} units):",
        f"    Buy  : {stats.vwap_buy:.4f}",
        f"    Sell : {stats.vwap_sell:.4f}",
        _RULE,
        "",
    ]
    return "\n".join(lines)


def format_json_report(stats: Stats, depth_pct: float, target_qty: float) -> str:
    """Render stats and the parameters that produced them as JSON."""
    payload = {
        "parameters": {"depth_pct": depth_pct, "target_qty": target_qty},
        "stats": stats.to_dict(),
        "derived": {"depth_imbalance": stats.depth_imbalance},
    }
    return json.dumps(payload, indent=2)
