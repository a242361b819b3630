"""
Data models for the netstats monitor.

Contains the dataclasses passed between the collection and output layers:
- CounterSnapshot: Raw cumulative counters for one interface
- ScaledValue: A byte quantity scaled to a readable unit
- StatsSnapshot: Speeds and totals computed for one tick
- MonitorConfig: Validated monitor settings
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Union

from ..interface_client.exceptions import ConfigurationError
from ..utils.validators import ConfigValidator


@dataclass(frozen=True)
class CounterSnapshot:
    """Cumulative byte counters for a single interface at one point in time."""
    interface: str
    bytes_sent: int = 0
    bytes_recv: int = 0


@dataclass(frozen=True)
class ScaledValue:
    """A byte quantity (or rate) expressed in a binary-prefixed unit."""
    value: float
    unit: str
    # Unscaled quantity the value was derived from
    raw: Union[int, float] = field(default=0, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'value': self.value, 'unit': self.unit}


@dataclass(frozen=True)
class StatsSnapshot:
    """Transfer speeds and cumulative usage computed for one tick."""
    interface: str
    sent_speed: ScaledValue
    recv_speed: ScaledValue
    total_sent: ScaledValue
    total_recv: ScaledValue
    total_usage: ScaledValue

    def to_dict(self) -> Dict[str, Any]:
        """Structured form with the output field names."""
        return {
            'interface': self.interface,
            'sentSpeed': self.sent_speed.to_dict(),
            'recvSpeed': self.recv_speed.to_dict(),
            'totalSent': self.total_sent.to_dict(),
            'totalRecv': self.total_recv.to_dict(),
            'totalUsage': self.total_usage.to_dict(),
        }


@dataclass(frozen=True)
class MonitorConfig:
    """Monitor settings, validated once at startup."""
    interface: str
    refresh_interval: int = 1
    precision: int = 2
    output_format: str = 'table'

    def __post_init__(self):
        is_valid, errors = ConfigValidator.validate_monitor_config({
            'interface': self.interface,
            'refresh_interval': self.refresh_interval,
            'precision': self.precision,
            'output_format': self.output_format,
        })
        if not is_valid:
            raise ConfigurationError('; '.join(errors), errors)
