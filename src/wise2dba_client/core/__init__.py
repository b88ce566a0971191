"""Core modules for the Wise2DBA client."""

from .client import JDispatcherClient, JobClient
from .options import OPTION_TABLE, OptionSpec, parse_command
from .sequence import load_data

__all__ = [
    "JDispatcherClient",
    "JobClient",
    "OPTION_TABLE",
    "OptionSpec",
    "parse_command",
    "load_data",
]
