"""
Output formatters for interface statistics.

Provides a bordered table for humans and single-line JSON records for tooling.
"""

import json
from typing import Callable, Dict

import click
from tabulate import tabulate

from ..stats.models import ScaledValue, StatsSnapshot

TABLE_HEADERS = ['Interface', 'Sent Speed', 'Recv Speed', 'Total Sent', 'Total Recv', 'Total Usage']


def format_scaled_value(scaled: ScaledValue, precision: int) -> str:
    """Format a scaled value as '<value fixed to precision> <unit>'."""
    return f"{scaled.value:.{precision}f} {scaled.unit}"


def format_stats_table(stats: StatsSnapshot, precision: int) -> str:
    """Format a stats snapshot as a bordered single-row table."""
    row = [
        stats.interface,
        format_scaled_value(stats.sent_speed, precision),
        format_scaled_value(stats.recv_speed, precision),
        format_scaled_value(stats.total_sent, precision),
        format_scaled_value(stats.total_recv, precision),
        format_scaled_value(stats.total_usage, precision),
    ]
    return tabulate(
        [row],
        headers=TABLE_HEADERS,
        tablefmt='grid',
        colalign=('left',) * len(TABLE_HEADERS),
        disable_numparse=True,
    )


def format_stats_json(stats: StatsSnapshot, precision: int = None) -> str:
    """Format a stats snapshot as one compact JSON object.

    Values are already rounded by the unit scaler, so precision is unused here.
    """
    return json.dumps(stats.to_dict(), separators=(',', ':'))


FORMATTERS: Dict[str, Callable[[StatsSnapshot, int], str]] = {
    'table': format_stats_table,
    'json': format_stats_json,
}


def output_stats(stats: StatsSnapshot, output_format: str, precision: int) -> None:
    """Write a stats snapshot to stdout in the requested format."""
    formatter = FORMATTERS[output_format]
    click.echo(formatter(stats, precision))
