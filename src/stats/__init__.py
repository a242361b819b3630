"""Network interface statistics collection modules."""

from .models import CounterSnapshot, ScaledValue, StatsSnapshot, MonitorConfig

__all__ = [
    'CounterSnapshot',
    'ScaledValue',
    'StatsSnapshot',
    'MonitorConfig',
]
