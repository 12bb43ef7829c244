import math
from dataclasses import dataclass
from typing import Optional, Sequence

from seatmon.config import DEFAULT_INTERVAL_MINUTES, DEFAULT_QUERY
from seatmon.core.exceptions import ArgumentError

HELP_FLAGS = ('--help', '-h')
INTERVAL_FLAGS = ('--interval', '-i')


@dataclass(frozen=True, slots=True)
class CliArguments:
    interval_minutes: Optional[float] = None
    show_help: bool = False


def parse_arguments(args: Sequence[str]) -> CliArguments:
    """Scan tokens left to right. Only recognized flags consume values;
    anything else is ignored."""
    interval_minutes: Optional[float] = None
    index = 0
    while index < len(args):
        arg = args[index]
        if arg in HELP_FLAGS:
            return CliArguments(interval_minutes=interval_minutes, show_help=True)
        if arg in INTERVAL_FLAGS:
            value = args[index + 1] if index + 1 < len(args) else None
            interval_minutes = _parse_interval(value)
            index += 1
        index += 1
    return CliArguments(interval_minutes=interval_minutes)


def _parse_interval(value: Optional[str]) -> float:
    try:
        minutes = float(value) if value else math.nan
    except ValueError:
        minutes = math.nan
    if not math.isfinite(minutes):
        raise ArgumentError('--interval requires a numeric value (minutes)')
    if minutes <= 0:
        raise ArgumentError('Interval must be greater than 0')
    return minutes


def usage_text(prog: str = 'seatmon') -> str:
    default = f'{DEFAULT_INTERVAL_MINUTES:g}'
    return f"""Seat Monitor - Track sold seats for events

Usage: {prog} [options]

Options:
  -i, --interval <minutes>    Check interval in minutes (default: {default})
  -h, --help                  Show this help message

Examples:
  {prog}                    # Check every {default} minutes (default)
  {prog} --interval 2       # Check every 2 minutes
  {prog} -i 0.5             # Check every 30 seconds

The monitor tracks sold seats using the JMESPath expression:
{DEFAULT_QUERY}

Press Ctrl+C to stop the monitor.
"""
