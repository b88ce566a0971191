"""Data models for the Wise2DBA command-line client."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class Action(str, Enum):
    """Operation selected for one invocation."""
    HELP = "help"
    VERSION = "version"
    PARAM_LIST = "paramList"
    PARAM_DETAIL = "paramDetail"
    SUBMIT = "submit"
    STATUS = "status"
    RESULT_TYPES = "resultTypes"
    POLLJOB = "polljob"
    EXIT = "exit"

    def __str__(self) -> str:
        return self.value


# Action before any action flag has been parsed
UNKNOWN_ACTION = "UNKNOWN"


@dataclass
class InputParameters:
    """Tool specific submission fields."""

    asequence: Optional[str] = None
    bsequence: Optional[str] = None
    para: bool = False
    para_specified: bool = False
    pretty: bool = False
    pretty_specified: bool = False

    def set_para(self, value: bool) -> None:
        """Enable or disable display of parameters in output."""
        self.para = value
        self.para_specified = True

    def set_pretty(self, value: bool) -> None:
        """Enable or disable pretty ASCII alignment."""
        self.pretty = value
        self.pretty_specified = True

    def to_form(self) -> Dict[str, str]:
        """Render the fields that were set as form data for submission."""
        form = {}
        if self.asequence is not None:
            form["asequence"] = self.asequence
        if self.bsequence is not None:
            form["bsequence"] = self.bsequence
        if self.para_specified:
            form["para"] = "true" if self.para else "false"
        if self.pretty_specified:
            form["pretty"] = "true" if self.pretty else "false"
        return form

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class SessionOptions:
    """Scalar options that apply to the whole invocation."""

    job_id: Optional[str] = None
    email: Optional[str] = None
    title: Optional[str] = None
    outfile: Optional[str] = None
    outformat: Optional[str] = None
    output_level: int = 1
    debug_level: int = 0
    endpoint: Optional[str] = None
    async_job: bool = False
    param_name: Optional[str] = None


@dataclass
class CommandLine:
    """Result of parsing argv: one action plus its parameters."""

    action: Union[Action, str] = UNKNOWN_ACTION
    params: InputParameters = field(default_factory=InputParameters)
    options: SessionOptions = field(default_factory=SessionOptions)


@dataclass
class ParamValue:
    """One allowed value of a service parameter."""

    label: str
    value: str
    default: bool = False


@dataclass
class ParamDetail:
    """Service description of a single input parameter."""

    name: str
    description: str = ""
    type: str = ""
    values: List[ParamValue] = field(default_factory=list)


@dataclass
class ResultType:
    """A result format available for a finished job."""

    identifier: str
    label: str = ""
    description: str = ""
    media_type: str = ""
    file_suffix: str = ""
