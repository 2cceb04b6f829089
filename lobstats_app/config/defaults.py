"""Default configuration parameters for order book analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisParams:
    """Metric calculation parameters."""
    depth_pct: float = 0.5                 # Depth window, +/- % around mid
    target_qty: float = 40.0               # Quantity used for VWAP walks


@dataclass(frozen=True)
class LoaderParams:
    """Snapshot loading parameters."""
    skip_header: bool = True               # First line is always discarded
    delimiter: str = ","


@dataclass(frozen=True)
class GeneratorParams:
    """Synthetic snapshot generator parameters."""
    filename: str = "orderbook.csv"
    levels: int = 10                       # Price levels per side
    mid_price: float = 100.0
    tick_size: float = 0.10                # Price step between levels
    min_size: float = 1.0
    max_size: float = 50.0


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    analysis: AnalysisParams
    loader: LoaderParams
    generator: GeneratorParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        analysis=AnalysisParams(),
        loader=LoaderParams(),
        generator=GeneratorParams(),
    )
