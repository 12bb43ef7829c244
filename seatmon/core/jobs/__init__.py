from seatmon.core.jobs.monitor import SeatMonitor

__all__ = [
    'SeatMonitor',
]
