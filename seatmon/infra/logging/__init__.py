from seatmon.infra.logging.console import ConsoleLogger
from seatmon.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
