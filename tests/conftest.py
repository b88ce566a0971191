#!/usr/bin/env python3
"""
Shared fixtures for Wise2DBA client tests.
"""

import logging
import sys
from pathlib import Path

import pytest
from loguru import logger

from wise2dba_client.exceptions import JobFailedError
from wise2dba_client.models import ParamDetail, ParamValue, ResultType

JOB_ID = "wise2dba-R20261018-114500-0123-4567-p1m"


class FakeJobClient:
    """In-memory JobClient that records every call."""

    def __init__(self, status: str = "FINISHED", error: Exception = None):
        self.calls = []
        self.status = status
        self.error = error
        self.closed = False

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error

    @property
    def call_names(self):
        return [call[0] for call in self.calls]

    def list_params(self):
        self._record("list_params")
        return ["asequence", "bsequence", "para", "pretty"]

    def param_detail(self, name):
        self._record("param_detail", name)
        return ParamDetail(
            name=name,
            description="Display parameters in output",
            type="BOOLEAN",
            values=[ParamValue("Yes", "true", default=True), ParamValue("No", "false")],
        )

    def submit_job(self, params, email, title=None):
        self._record("submit_job", params, email, title)
        return JOB_ID

    def get_status(self, job_id):
        self._record("get_status", job_id)
        return self.status

    def wait_for_completion(self, job_id):
        self._record("wait_for_completion", job_id)
        if self.status in ("ERROR", "FAILURE"):
            raise JobFailedError(job_id, self.status)
        return self.status

    def get_result_types(self, job_id):
        self._record("get_result_types", job_id)
        return [ResultType("out", "Tool output", "The output from the tool", "text/plain", "txt")]

    def poll_results(self, job_id, outfile=None, outformat=None):
        self._record("poll_results", job_id, outfile, outformat)
        return [Path(f"{outfile or job_id}.out.txt")]

    def client_version(self):
        return "Fake client 0.0"

    def client_license(self):
        return "Fake license"

    def close(self):
        self.closed = True


@pytest.fixture
def cli_logging():
    """Restore logging after a test that lets the client install its handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logger.remove()
    logger.add(sys.__stderr__)


@pytest.fixture
def fake_client():
    return FakeJobClient()


@pytest.fixture
def sequence_files(tmp_path):
    """Write two small FASTA files and return their paths."""
    seq_a = tmp_path / "seqA.fasta"
    seq_b = tmp_path / "seqB.fasta"
    seq_a.write_text(">HSHBB\nACCTGGGCTTGAGCCACAGCTTCTGGTCAAGCTTG\n")
    seq_b.write_text(">MMHBB\nACCTGGGCTTGGACCACTGCTTCAGCTTCAAGCTTG\n")
    return seq_a, seq_b


@pytest.fixture
def make_client():
    """Factory for FakeJobClient with a custom status or error."""
    return FakeJobClient
