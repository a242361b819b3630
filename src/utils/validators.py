"""Input validation utilities."""

from typing import Any

OUTPUT_FORMATS = ('table', 'json')

MIN_REFRESH_INTERVAL = 1
MAX_REFRESH_INTERVAL = 3600
MIN_PRECISION = 0
MAX_PRECISION = 6

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def validate_interface_name(interface: str) -> bool:
    """Validate interface name (any non-blank name without control characters)."""
    if not isinstance(interface, str) or not interface.strip():
        return False

    return all(ch.isprintable() for ch in interface)

def validate_refresh_interval(interval: Any) -> bool:
    """Validate refresh interval in whole seconds."""
    return _is_int(interval) and MIN_REFRESH_INTERVAL <= interval <= MAX_REFRESH_INTERVAL

def validate_precision(precision: Any) -> bool:
    """Validate number of decimal places."""
    return _is_int(precision) and MIN_PRECISION <= precision <= MAX_PRECISION

def validate_output_format(format_type: Any) -> bool:
    """Validate output format type."""
    return format_type in OUTPUT_FORMATS

def validate_log_level(level: str) -> bool:
    """Validate logging level."""
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    return isinstance(level, str) and level.upper() in valid_levels

class ConfigValidator:
    """Configuration validator class."""

    @staticmethod
    def validate_monitor_config(config: dict) -> tuple[bool, list[str]]:
        """Validate monitor configuration."""
        errors = []

        if not validate_interface_name(config.get('interface')):
            errors.append("Interface name is required")

        if 'refresh_interval' in config and not validate_refresh_interval(config['refresh_interval']):
            errors.append(
                f"Refresh interval must be between {MIN_REFRESH_INTERVAL} and {MAX_REFRESH_INTERVAL} seconds"
            )

        if 'precision' in config and not validate_precision(config['precision']):
            errors.append(f"Precision must be between {MIN_PRECISION} and {MAX_PRECISION} decimal places")

        if 'output_format' in config and not validate_output_format(config['output_format']):
            errors.append(f"Invalid output format. Allowed values: {', '.join(OUTPUT_FORMATS)}")

        return len(errors) == 0, errors

    @staticmethod
    def validate_logging_config(config: dict) -> tuple[bool, list[str]]:
        """Validate logging configuration."""
        errors = []

        # Check log level
        if 'level' in config and not validate_log_level(config['level']):
            errors.append("Invalid log level. Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")

        # Check max_bytes
        if 'max_bytes' in config:
            try:
                max_bytes = int(config['max_bytes'])
                if max_bytes <= 0:
                    errors.append("max_bytes must be positive")
            except (ValueError, TypeError):
                errors.append("max_bytes must be a number")

        # Check backup_count
        if 'backup_count' in config:
            try:
                backup_count = int(config['backup_count'])
                if backup_count < 0:
                    errors.append("backup_count must be non-negative")
            except (ValueError, TypeError):
                errors.append("backup_count must be a number")

        return len(errors) == 0, errors
