"""Pytest fixtures for netstats tests."""

import pytest
from pathlib import Path
from unittest.mock import Mock


def pytest_configure(config):
    """Register custom pytest marks."""
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )

# Add the project root to the Python path
import sys
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.stats.models import CounterSnapshot, MonitorConfig
from src.interface_client.exceptions import InterfaceNotFoundError


class FakeCounterSource:
    """Counter source that replays a fixed sequence of (sent, recv) readings.

    A reading of None raises InterfaceNotFoundError, as if the interface
    disappeared for that query.
    """

    def __init__(self, readings, interface='eth0'):
        self.readings = list(readings)
        self.interface = interface
        self.calls = 0

    def query(self, interface):
        reading = self.readings[min(self.calls, len(self.readings) - 1)]
        self.calls += 1
        if reading is None or interface != self.interface:
            raise InterfaceNotFoundError(interface, [self.interface])
        sent, recv = reading
        return CounterSnapshot(interface=interface, bytes_sent=sent, bytes_recv=recv)

    def list_interfaces(self):
        return [self.interface]


@pytest.fixture
def fake_source_factory():
    """Fixture building FakeCounterSource instances from readings."""
    def _factory(readings, interface='eth0'):
        return FakeCounterSource(readings, interface)
    return _factory


@pytest.fixture
def monitor_config():
    """Fixture providing a default monitor configuration."""
    return MonitorConfig(interface='eth0', refresh_interval=1, precision=2, output_format='json')


@pytest.fixture
def stop_event():
    """Fixture providing a stop event whose wait never blocks and never signals stop."""
    event = Mock()
    event.wait.return_value = False
    return event
