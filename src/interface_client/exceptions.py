"""Custom exceptions for the netstats monitor."""

class NetStatsError(Exception):
    """Base exception for netstats operations."""
    pass

class InterfaceNotFoundError(NetStatsError):
    """No interface with the requested name exists."""
    def __init__(self, interface: str, available: list = None):
        self.interface = interface
        self.available = list(available or [])
        message = f"interface not found: {interface}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)

class CounterQueryError(NetStatsError):
    """Querying the OS interface counters failed."""
    pass

class ConfigurationError(NetStatsError):
    """Configuration is invalid."""
    def __init__(self, message: str, errors: list = None):
        super().__init__(message)
        self.errors = list(errors or [])
