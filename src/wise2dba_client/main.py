#!/usr/bin/env python3
"""
Main module for the Wise2DBA command-line client.

This module parses the command line and dispatches the selected action to a
job service client.
"""

import logging
import sys
import traceback
from typing import Callable, Dict, Optional, Sequence

from loguru import logger

from .config import ClientConfig
from .core.client import JDispatcherClient, JobClient
from .core.options import parse_command
from .exceptions import ClientError, JobFailedError
from .models import Action, CommandLine
from .usage import usage_text

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: str = "WARNING") -> None:
    """Setup logging configuration."""
    level = log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}")


def log_level_for(command: CommandLine) -> str:
    """Map --debugLevel and --verbose/--quiet onto a logging level."""
    if command.options.debug_level > 0:
        return "DEBUG"
    if command.options.output_level > 1:
        return "INFO"
    return "WARNING"


def print_usage() -> None:
    print(usage_text())


class Dispatcher:
    """Runs the action of a parsed command against a job service client."""

    def __init__(self, command: CommandLine, client: Optional[JobClient] = None):
        """
        Initialize dispatcher.

        Args:
            command: Parsed command line
            client: Job service client, created from configuration when omitted
        """
        self.command = command
        self._client = client
        self._owns_client = False
        self._handlers: Dict[Action, Callable[[], None]] = {
            Action.PARAM_LIST: self.print_params,
            Action.PARAM_DETAIL: self.print_param_detail,
            Action.SUBMIT: self.submit_job,
            Action.STATUS: self.print_status,
            Action.RESULT_TYPES: self.print_result_types,
            Action.POLLJOB: self.get_results,
            Action.VERSION: self.print_version,
            Action.HELP: print_usage,
        }

    @property
    def options(self):
        return self.command.options

    @property
    def client(self) -> JobClient:
        if self._client is None:
            config = ClientConfig.load(endpoint=self.options.endpoint)
            self._client = JDispatcherClient(config)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the client if this dispatcher created it."""
        if self._owns_client and self._client is not None:
            self._client.close()

    def dispatch(self) -> int:
        """
        Perform the selected action.

        Returns:
            Exit code: 0 on success, 1 for an unknown action
        """
        action = self.command.action
        logger.debug(f"Dispatching action: {action}")

        if action == Action.EXIT:
            return 0

        handler = self._handlers.get(action)
        if handler is None:
            print(f"Error: unknown action {action}")
            return 1

        handler()
        return 0

    def _inform(self, message: str, level: int = 1) -> None:
        """Print a progress message if the output level allows it."""
        if self.options.output_level >= level:
            print(message, file=sys.stderr)

    def _require_job_id(self) -> str:
        if not self.options.job_id:
            raise ClientError(f"A job identifier is required for {self.command.action} (--jobid)")
        return self.options.job_id

    def print_params(self) -> None:
        for name in self.client.list_params():
            print(name)

    def print_param_detail(self) -> None:
        detail = self.client.param_detail(self.options.param_name)
        print(f"{detail.name}\t{detail.type}")
        print(detail.description)
        for value in detail.values:
            marker = "\tdefault" if value.default else ""
            print(f"{value.value}{marker}")
            if value.label and value.label != value.value:
                print(f"\t{value.label}")

    def submit_job(self) -> None:
        job_id = self.client.submit_job(self.command.params, self.options.email, self.options.title)

        if self.options.async_job:
            print(job_id)
            return

        self._inform(f"JobId: {job_id}")
        try:
            status = self.client.wait_for_completion(job_id)
        except JobFailedError:
            # The service keeps error output as a job result
            self._save_results(job_id)
            raise
        self._inform(f"Status: {status}", level=2)
        self._save_results(job_id)

    def print_status(self) -> None:
        print(self.client.get_status(self._require_job_id()))

    def print_result_types(self) -> None:
        for result_type in self.client.get_result_types(self._require_job_id()):
            print(result_type.identifier)
            if result_type.label:
                print(f"\t{result_type.label}")
            if result_type.description:
                print(f"\t{result_type.description}")
            if result_type.media_type:
                print(f"\t{result_type.media_type}")
            if result_type.file_suffix:
                print(f"\t{result_type.file_suffix}")

    def get_results(self) -> None:
        self._save_results(self._require_job_id())

    def _save_results(self, job_id: str) -> None:
        written = self.client.poll_results(job_id, self.options.outfile, self.options.outformat)
        for path in written:
            if path != "-":
                self._inform(f"Wrote file: {path}")

    def print_version(self) -> None:
        print(self.client.client_version())
        print(self.client.client_license())


def run(args: Sequence[str], client: Optional[JobClient] = None, configure_logging: bool = False) -> int:
    """
    Parse the command line and perform the selected action.

    Args:
        args: Command-line tokens, without the program name
        client: Job service client, created from configuration when omitted
        configure_logging: Install this client's log handlers at the level
            chosen by --debugLevel/--verbose/--quiet. Left off when embedded,
            so the host program's logging setup is untouched.

    Returns:
        Exit code: 0 on success, 1 for an unknown action, 2 on any error
    """
    if len(args) < 1:
        print_usage()
        return 0

    dispatcher = None
    try:
        command = parse_command(args)
        if configure_logging:
            setup_logging(log_level_for(command))
        for token in args:
            logger.debug(f"arg: {token}")

        dispatcher = Dispatcher(command, client)
        return dispatcher.dispatch()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 2
    finally:
        if dispatcher is not None:
            dispatcher.close()


def main() -> None:
    """Main entry point for command line interface."""
    try:
        sys.exit(run(sys.argv[1:], configure_logging=True))
    except KeyboardInterrupt:
        logging.warning("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
