from seatmon.infra.timer.threading import ThreadingScheduler

__all__ = ["ThreadingScheduler"]
