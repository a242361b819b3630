"""Polling loop for a single network interface."""

import enum
import signal
import threading
from typing import Optional

from .models import MonitorConfig, StatsSnapshot
from .sampler import Sampler
from ..interface_client.client import CounterSource
from ..interface_client.exceptions import NetStatsError
from ..utils.logger import get_logger, set_interface_context
from ..utils.table_formatters import output_stats

logger = get_logger(__name__)


class MonitorState(enum.Enum):
    CREATED = 'created'
    RUNNING = 'running'
    STOPPED = 'stopped'


class NetworkMonitor:
    """Samples one interface every refresh interval and renders the results.

    Each iteration blocks on a single ``Event.wait(interval)``: a timeout means
    it is time to tick, a set event means a stop was requested.
    """

    def __init__(self, config: MonitorConfig, source: Optional[CounterSource] = None,
                 stop_event: Optional[threading.Event] = None):
        self.config = config
        self.source = source or CounterSource()
        self.sampler = Sampler(self.source, config.interface, config.refresh_interval, config.precision)
        self.state = MonitorState.CREATED
        self.ticks = 0

        self._stop_event = stop_event or threading.Event()
        self._stats: Optional[StatsSnapshot] = None
        self._stats_lock = threading.Lock()

        set_interface_context(config.interface)

    @property
    def latest_stats(self) -> Optional[StatsSnapshot]:
        """Most recent successfully computed snapshot, safe to read from other threads."""
        with self._stats_lock:
            return self._stats

    def stop(self) -> None:
        """Request a graceful stop; honored between ticks."""
        self._stop_event.set()

    def handle_signal(self, signum, _frame) -> None:
        logger.info(f"Received {signal.Signals(signum).name}, stopping")
        self.stop()

    def install_signal_handlers(self) -> None:
        """Stop on SIGINT and SIGTERM. Must be called from the main thread."""
        signal.signal(signal.SIGINT, self.handle_signal)
        signal.signal(signal.SIGTERM, self.handle_signal)

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Run the polling loop until stopped.

        Args:
            max_ticks: Stop after this many ticks (None runs until a stop request)

        Returns:
            Number of ticks performed

        Raises:
            NetStatsError: the initial counter query failed
        """
        # Fatal if the baseline cannot be captured
        self.sampler.start()
        self.state = MonitorState.RUNNING
        logger.info(
            f"Monitoring {self.config.interface} every {self.config.refresh_interval}s "
            f"({self.config.output_format} output)"
        )

        try:
            while not self._stop_event.wait(self.config.refresh_interval):
                self._tick()
                self.ticks += 1
                if max_ticks is not None and self.ticks >= max_ticks:
                    break
        finally:
            self.state = MonitorState.STOPPED
            logger.info(f"Stopped after {self.ticks} tick(s)")

        return self.ticks

    def _tick(self) -> None:
        try:
            stats = self.sampler.tick()
        except NetStatsError as e:
            logger.error(f"Error getting network stats: {e}")
            return

        with self._stats_lock:
            self._stats = stats

        try:
            output_stats(stats, self.config.output_format, self.config.precision)
        except BrokenPipeError:
            logger.error("Output pipe closed, stopping")
            self.stop()
        except OSError as e:
            logger.error(f"Failed to write stats: {e}")
