"""Client for reading per-interface byte counters from the operating system (read-only)."""

from typing import List

import psutil

from .exceptions import InterfaceNotFoundError, CounterQueryError
from ..stats.models import CounterSnapshot
from ..utils.logger import get_logger

logger = get_logger(__name__)

class CounterSource:
    """Read-only source of cumulative sent/received byte counters for host interfaces."""

    def _read_all_counters(self) -> dict:
        """Return psutil's per-NIC counters, mapping query failures to CounterQueryError."""
        try:
            return psutil.net_io_counters(pernic=True)
        except (OSError, RuntimeError) as e:
            raise CounterQueryError(f"failed to read interface counters: {e}") from e

    def list_interfaces(self) -> List[str]:
        """Get the names of all interfaces currently present on the host."""
        return sorted(self._read_all_counters().keys())

    def query(self, interface: str) -> CounterSnapshot:
        """
        Get the current cumulative counters for exactly one interface.

        Args:
            interface: Name of the interface (e.g. eth0, wlan0)

        Returns:
            CounterSnapshot for the interface

        Raises:
            InterfaceNotFoundError: no interface with that name exists
            CounterQueryError: the counters could not be read
        """
        counters = self._read_all_counters()
        io = counters.get(interface)
        if io is None:
            raise InterfaceNotFoundError(interface, sorted(counters.keys()))

        logger.debug(f"Read counters for {interface}: sent={io.bytes_sent} recv={io.bytes_recv}")
        return CounterSnapshot(
            interface=interface,
            bytes_sent=io.bytes_sent,
            bytes_recv=io.bytes_recv,
        )
