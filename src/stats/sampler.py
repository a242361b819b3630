"""Interface counter sampling: per-tick deltas and running totals (read-only)."""

from typing import Optional

from .models import CounterSnapshot, StatsSnapshot
from ..utils.logger import get_logger
from ..utils.units import scale_speed, scale_usage

logger = get_logger(__name__)

class Sampler:
    """Derives transfer speeds and totals from consecutive counter snapshots.

    The source only needs a ``query(interface) -> CounterSnapshot`` method.
    Errors raised by the source propagate unchanged; the caller decides
    whether they are fatal.
    """

    def __init__(self, source, interface: str, refresh_interval: int, precision: int):
        self.source = source
        self.interface = interface
        self.refresh_interval = refresh_interval
        self.precision = precision

        self.total_sent_start: Optional[int] = None
        self.total_recv_start: Optional[int] = None
        self.previous: Optional[CounterSnapshot] = None

    @property
    def started(self) -> bool:
        return self.previous is not None

    def start(self) -> CounterSnapshot:
        """Capture the baseline counters that totals are measured against."""
        initial = self.source.query(self.interface)
        self.total_sent_start = initial.bytes_sent
        self.total_recv_start = initial.bytes_recv
        self.previous = initial
        logger.info(
            f"Baseline captured for {self.interface}: sent={initial.bytes_sent} recv={initial.bytes_recv}"
        )
        return initial

    def tick(self) -> StatsSnapshot:
        """Query the current counters and compute speeds and totals since start."""
        if not self.started:
            raise RuntimeError("Sampler.tick() called before start()")

        current = self.source.query(self.interface)

        sent_delta = current.bytes_sent - self.previous.bytes_sent
        recv_delta = current.bytes_recv - self.previous.bytes_recv
        if sent_delta < 0 or recv_delta < 0:
            # Passed through as-is; the interface was most likely reset
            logger.warning(
                f"Counters went backwards on {self.interface} "
                f"(sent delta={sent_delta}, recv delta={recv_delta})"
            )

        total_sent = current.bytes_sent - self.total_sent_start
        total_recv = current.bytes_recv - self.total_recv_start

        stats = StatsSnapshot(
            interface=self.interface,
            sent_speed=scale_speed(sent_delta, self.refresh_interval, self.precision),
            recv_speed=scale_speed(recv_delta, self.refresh_interval, self.precision),
            total_sent=scale_usage(total_sent, self.precision),
            total_recv=scale_usage(total_recv, self.precision),
            total_usage=scale_usage(total_sent + total_recv, self.precision),
        )

        self.previous = current
        return stats
