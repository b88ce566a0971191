"""Wise2DBA command-line client.

Submits DNA block alignment jobs to the EMBL-EBI Wise2DBA web service and
retrieves their results.
"""

__version__ = "1.0.0"

from .config import ClientConfig
from .models import Action, CommandLine, InputParameters, ParamDetail, ParamValue, ResultType, SessionOptions
from .core import JDispatcherClient, JobClient, load_data, parse_command
from .main import Dispatcher, run

__all__ = [
    "__version__",
    "ClientConfig",
    "Action",
    "CommandLine",
    "InputParameters",
    "ParamDetail",
    "ParamValue",
    "ResultType",
    "SessionOptions",
    "JDispatcherClient",
    "JobClient",
    "load_data",
    "parse_command",
    "Dispatcher",
    "run",
]
