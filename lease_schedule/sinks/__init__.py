"""Output sinks for exporting generated payments."""

from lease_schedule.sinks.console import ConsoleSink
from lease_schedule.sinks.json_file import JsonFileSink
from lease_schedule.sinks.postgres import PostgresSink

__all__ = ["ConsoleSink", "JsonFileSink", "PostgresSink"]
