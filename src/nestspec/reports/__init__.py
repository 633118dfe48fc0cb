from nestspec.reports.base import Reporter
from nestspec.reports.console import ConsoleReporter, DotReporter, VerboseReporter, format_elapsed


__all__ = ["ConsoleReporter", "DotReporter", "Reporter", "VerboseReporter", "format_elapsed"]
