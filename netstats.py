#!/usr/bin/env python3
"""
Network Interface Statistics Monitor
Polls one interface and reports transfer speed and usage since start (read-only)
"""

import sys
import os
import click
from typing import Optional

# Add project root to Python path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.settings import Settings, settings
from src.interface_client.client import CounterSource
from src.interface_client.exceptions import NetStatsError, ConfigurationError
from src.stats.models import MonitorConfig
from src.stats.monitor import NetworkMonitor
from src.utils.logger import configure_logging, get_logger, set_log_level
from src.utils.validators import (
    OUTPUT_FORMATS,
    MIN_REFRESH_INTERVAL,
    MAX_REFRESH_INTERVAL,
    MIN_PRECISION,
    MAX_PRECISION,
)

logger = get_logger(__name__)

def build_config(app_settings: Settings, interface, interval, precision, output_format) -> MonitorConfig:
    """Merge command-line values over configured defaults and validate the result."""
    defaults = app_settings.get_monitor_defaults()
    return MonitorConfig(
        interface=interface,
        refresh_interval=interval if interval is not None else defaults.get('refresh_interval', 1),
        precision=precision if precision is not None else defaults.get('precision', 2),
        output_format=output_format or defaults.get('output_format', 'table'),
    )

def load_settings(config_file: Optional[str]) -> Settings:
    """Load and validate settings, then apply their logging section."""
    app_settings = Settings(config_file) if config_file else settings
    app_settings.validate()
    try:
        configure_logging(app_settings)
    except OSError as e:
        raise ConfigurationError(f"cannot open log file: {e}") from e
    return app_settings

@click.command(context_settings=dict(help_option_names=['-h', '--help']))
@click.option('--interface', '-i', help='Network interface to monitor (required)')
@click.option('--interval', '-t', type=click.IntRange(MIN_REFRESH_INTERVAL, MAX_REFRESH_INTERVAL),
              help='Refresh interval in seconds [default: 1]')
@click.option('--precision', '-p', type=click.IntRange(MIN_PRECISION, MAX_PRECISION),
              help='Decimal places for rounding numbers [default: 2]')
@click.option('--format', '-f', 'output_format', type=click.Choice(list(OUTPUT_FORMATS)),
              help='Output format [default: table]')
@click.option('--count', '-n', type=click.IntRange(min=1), help='Stop after this many updates')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file path')
@click.option('--list', '-l', 'list_interfaces', is_flag=True, help='List available interfaces and exit')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(interface, interval, precision, output_format, count, config_file, list_interfaces, debug):
    """Monitor transfer speed and total usage of a network interface."""
    try:
        app_settings = load_settings(config_file)
    except ConfigurationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    if debug:
        set_log_level('DEBUG')

    if list_interfaces:
        try:
            for name in CounterSource().list_interfaces():
                click.echo(name)
        except NetStatsError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        return

    if interface is None:
        raise click.UsageError("Missing option '-i' / '--interface'.")
    if not interface.strip():
        raise click.BadParameter('interface name must not be empty', param_hint="'-i' / '--interface'")

    try:
        config = build_config(app_settings, interface, interval, precision, output_format)
    except ConfigurationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Resolved configuration: {config}")
    monitor = NetworkMonitor(config)
    monitor.install_signal_handlers()

    try:
        monitor.run(max_ticks=count)
    except NetStatsError as e:
        click.echo(f"Error: Network monitoring error: {e}", err=True)
        sys.exit(1)

if __name__ == '__main__':
    cli()
