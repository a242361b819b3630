"""
Binary (1024-based) unit scaling for byte counts and transfer rates.

Usage Examples:
    from ..utils.units import scale_speed, scale_usage

    scale_speed(12958993, 1, 2)      # ScaledValue(value=12.36, unit='MB/s')
    scale_usage(1321528114, 2)       # ScaledValue(value=1.23, unit='GB')
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple, Union

from ..stats.models import ScaledValue

KB = 1024
MB = KB * 1024
GB = MB * 1024

# Evaluated highest first; anything below the last threshold stays in bytes
USAGE_UNITS: Tuple[Tuple[int, str], ...] = (
    (GB, 'GB'),
    (MB, 'MB'),
    (KB, 'KB'),
)
SPEED_UNITS: Tuple[Tuple[int, str], ...] = (
    (GB, 'GB/s'),
    (MB, 'MB/s'),
    (KB, 'KB/s'),
)


def round_half_up(value: float, precision: int) -> float:
    """Round to `precision` decimal places, ties away from zero."""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def _scale(quantity: float, units: Tuple[Tuple[int, str], ...], base_unit: str,
           precision: int) -> Tuple[float, str]:
    for threshold, label in units:
        if quantity >= threshold:
            return round_half_up(quantity / threshold, precision), label
    return round_half_up(quantity, precision), base_unit


def scale_speed(num_bytes: Union[int, float], interval: float, precision: int) -> ScaledValue:
    """
    Convert bytes transferred over `interval` seconds to a rate in B/s, KB/s, MB/s or GB/s.

    Negative byte counts (counter rollback) are not corrected and come out as
    negative B/s values.
    """
    rate = num_bytes / interval
    value, unit = _scale(rate, SPEED_UNITS, 'B/s', precision)
    return ScaledValue(value=value, unit=unit, raw=rate)


def scale_usage(num_bytes: Union[int, float], precision: int) -> ScaledValue:
    """Convert a byte count to B, KB, MB or GB."""
    value, unit = _scale(float(num_bytes), USAGE_UNITS, 'B', precision)
    return ScaledValue(value=value, unit=unit, raw=num_bytes)
