"""
Command-line option parsing for the Wise2DBA client.

Every option is accepted in two spellings, ``--name`` and ``/name``. Both are
mapped onto one canonical ``OptionSpec`` before any handling happens.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..exceptions import MissingOptionValueError
from ..models import Action, CommandLine
from .sequence import load_data


@dataclass(frozen=True)
class OptionSpec:
    """A recognized option and what it does to the parsed command."""

    name: str
    apply: Callable[[CommandLine, Optional[str]], None]
    takes_value: bool = False
    aliases: Tuple[str, ...] = ()

    @property
    def spellings(self) -> Tuple[str, ...]:
        """All argv spellings that select this option."""
        return (f"--{self.name}", f"/{self.name}") + self.aliases


def _set_action(action: Action) -> Callable[[CommandLine, Optional[str]], None]:
    def apply(command: CommandLine, value: Optional[str]) -> None:
        command.action = action
    return apply


def _set_option(attribute: str) -> Callable[[CommandLine, Optional[str]], None]:
    def apply(command: CommandLine, value: Optional[str]) -> None:
        setattr(command.options, attribute, value)
    return apply


def _param_detail(command: CommandLine, value: Optional[str]) -> None:
    command.options.param_name = value
    command.action = Action.PARAM_DETAIL


def _adjust_output_level(delta: int) -> Callable[[CommandLine, Optional[str]], None]:
    def apply(command: CommandLine, value: Optional[str]) -> None:
        command.options.output_level += delta
    return apply


def _async(command: CommandLine, value: Optional[str]) -> None:
    command.action = Action.SUBMIT
    command.options.async_job = True


def _debug_level(command: CommandLine, value: Optional[str]) -> None:
    command.options.debug_level = int(value)


def _sequence(attribute: str) -> Callable[[CommandLine, Optional[str]], None]:
    def apply(command: CommandLine, value: Optional[str]) -> None:
        setattr(command.params, attribute, load_data(value))
        command.action = Action.SUBMIT
    return apply


OPTIONS: List[OptionSpec] = [
    # Generic options
    OptionSpec("help", _set_action(Action.HELP), aliases=("-h", "/h")),
    OptionSpec("version", _set_action(Action.VERSION)),
    OptionSpec("params", _set_action(Action.PARAM_LIST)),
    OptionSpec("paramDetail", _param_detail, takes_value=True),
    OptionSpec("jobid", _set_option("job_id"), takes_value=True),
    OptionSpec("status", _set_action(Action.STATUS)),
    OptionSpec("resultTypes", _set_action(Action.RESULT_TYPES)),
    OptionSpec("polljob", _set_action(Action.POLLJOB)),
    OptionSpec("outfile", _set_option("outfile"), takes_value=True),
    OptionSpec("outformat", _set_option("outformat"), takes_value=True),
    OptionSpec("verbose", _adjust_output_level(1)),
    OptionSpec("quiet", _adjust_output_level(-1)),
    OptionSpec("email", _set_option("email"), takes_value=True),
    OptionSpec("title", _set_option("title"), takes_value=True),
    OptionSpec("async", _async),
    OptionSpec("debugLevel", _debug_level, takes_value=True),
    OptionSpec("endpoint", _set_option("endpoint"), takes_value=True),
    # Tool specific options
    OptionSpec("para", lambda command, value: command.params.set_para(True)),
    OptionSpec("nopara", lambda command, value: command.params.set_para(False)),
    OptionSpec("pretty", lambda command, value: command.params.set_pretty(True)),
    OptionSpec("nopretty", lambda command, value: command.params.set_pretty(False)),
    # Input data
    OptionSpec("asequence", _sequence("asequence"), takes_value=True),
    OptionSpec("bsequence", _sequence("bsequence"), takes_value=True),
]

OPTION_TABLE: Dict[str, OptionSpec] = {
    spelling: spec for spec in OPTIONS for spelling in spec.spellings
}


def is_unknown_option(token: str) -> bool:
    """Check whether an unrecognized token looks like an option."""
    return token.startswith("--") or token.rfind("/") == 0


def parse_command(args: Sequence[str]) -> CommandLine:
    """
    Parse command-line tokens left to right.

    Args:
        args: Command-line tokens, without the program name

    Returns:
        The parsed command. Its action is ``Action.EXIT`` when an unknown
        option aborted parsing.

    Raises:
        MissingOptionValueError: If an option expecting a value is the last token
    """
    command = CommandLine()
    i = 0
    while i < len(args):
        token = args[i]
        spec = OPTION_TABLE.get(token)
        if spec is None:
            if is_unknown_option(token):
                print(f"Error: unknown option: {token}\n", file=sys.stderr)
                command.action = Action.EXIT
                return command
            i += 1
            continue

        value = None
        if spec.takes_value:
            i += 1
            if i >= len(args):
                raise MissingOptionValueError(token)
            value = args[i]

        spec.apply(command, value)
        i += 1

    return command
