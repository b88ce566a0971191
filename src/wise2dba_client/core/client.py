#!/usr/bin/env python3
"""
Web service client module for the Wise2DBA client.

This module defines the interface the dispatcher needs from a job service and
its implementation against the EBI JDispatcher REST API.
"""

from __future__ import annotations

import sys
import time
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Protocol, Union

import httpx
from loguru import logger

from .. import __version__
from ..config import ClientConfig
from ..exceptions import ClientError, JobFailedError, ServiceError
from ..models import InputParameters, ParamDetail, ParamValue, ResultType
from ..usage import CLIENT_LICENSE

# Job states that mean the service has not finished with the job yet
PENDING_STATES = ("RUNNING", "PENDING")
FINISHED = "FINISHED"


class JobClient(Protocol):
    """Operations the command-line dispatcher performs on a job service."""

    def list_params(self) -> List[str]: ...

    def param_detail(self, name: str) -> ParamDetail: ...

    def submit_job(self, params: InputParameters, email: Optional[str], title: Optional[str] = None) -> str: ...

    def get_status(self, job_id: str) -> str: ...

    def wait_for_completion(self, job_id: str) -> str: ...

    def get_result_types(self, job_id: str) -> List[ResultType]: ...

    def poll_results(
        self, job_id: str, outfile: Optional[str] = None, outformat: Optional[str] = None
    ) -> List[Union[Path, str]]: ...

    def client_version(self) -> str: ...

    def client_license(self) -> str: ...

    def close(self) -> None: ...


def _text(element: ET.Element, tag: str) -> str:
    """Get stripped text of a child element, empty if absent."""
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def parse_parameters(xml_text: str) -> List[str]:
    """Parse a <parameters> document into parameter names."""
    root = ET.fromstring(xml_text)
    return [el.text.strip() for el in root.iter("id") if el.text]


def parse_param_detail(xml_text: str) -> ParamDetail:
    """Parse a <parameter> detail document."""
    root = ET.fromstring(xml_text)
    values = []
    values_el = root.find("values")
    if values_el is not None:
        for value_el in values_el.findall("value"):
            values.append(ParamValue(
                label=_text(value_el, "label"),
                value=_text(value_el, "value"),
                default=_text(value_el, "defaultValue").lower() == "true",
            ))

    return ParamDetail(
        name=_text(root, "name"),
        description=_text(root, "description"),
        type=_text(root, "type"),
        values=values,
    )


def parse_result_types(xml_text: str) -> List[ResultType]:
    """Parse a <types> document into result types."""
    root = ET.fromstring(xml_text)
    return [
        ResultType(
            identifier=_text(type_el, "identifier"),
            label=_text(type_el, "label"),
            description=_text(type_el, "description"),
            media_type=_text(type_el, "mediaType"),
            file_suffix=_text(type_el, "fileSuffix"),
        )
        for type_el in root.iter("type")
    ]


def _error_description(response: httpx.Response) -> str:
    """Extract the service's error description from a failed response."""
    try:
        root = ET.fromstring(response.text)
    except ET.ParseError:
        return response.text.strip() or response.reason_phrase
    description = root.findtext("description")
    return description.strip() if description else response.reason_phrase


class JDispatcherClient:
    """
    JobClient implementation for the JDispatcher REST service.

    Usage:
        with JDispatcherClient(ClientConfig.load()) as client:
            job_id = client.submit_job(params, "user@example.org")
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep=time.sleep,
    ):
        """
        Initialize the service client.

        Args:
            config: Client configuration, defaults to ClientConfig.load()
            transport: Optional httpx transport, used to stub the service
            sleep: Function used to wait between status checks
        """
        self.config = config or ClientConfig.load()
        self._sleep = sleep
        self._client = httpx.Client(
            base_url=self.config.endpoint,
            timeout=self.config.timeout,
            headers={"User-Agent": self.user_agent},
            transport=transport,
        )

    @property
    def user_agent(self) -> str:
        return f"{self.config.user_agent_name}/{__version__} (Python {sys.version.split()[0]})"

    def __enter__(self) -> "JDispatcherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Make an HTTP request to the service.

        Raises:
            ServiceError: On a non-2xx response
        """
        logger.debug(f"{method} {self.config.endpoint}{path}")
        response = self._client.request(method, path, **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.is_error:
            raise ServiceError(
                _error_description(response),
                status_code=response.status_code,
                url=str(response.request.url),
            )
        return response

    def list_params(self) -> List[str]:
        response = self._request("GET", "/parameters")
        return parse_parameters(response.text)

    def param_detail(self, name: str) -> ParamDetail:
        response = self._request("GET", f"/parameterdetails/{name}")
        return parse_param_detail(response.text)

    def submit_job(self, params: InputParameters, email: Optional[str], title: Optional[str] = None) -> str:
        """
        Submit a job to the service.

        Args:
            params: Tool specific input parameters
            email: User e-mail address, required by the service
            title: Optional job title

        Returns:
            Job identifier

        Raises:
            ClientError: If no e-mail address was given
        """
        if not email:
            raise ClientError("An e-mail address is required to submit a job (--email)")

        form = {"email": email}
        if title:
            form["title"] = title
        form.update(params.to_form())

        logger.info(f"Submitting job with parameters: {', '.join(form)}")
        response = self._request("POST", "/run", data=form)
        job_id = response.text.strip()
        logger.info(f"Submitted job {job_id}")
        return job_id

    def get_status(self, job_id: str) -> str:
        response = self._request("GET", f"/status/{job_id}")
        return response.text.strip()

    def wait_for_completion(self, job_id: str) -> str:
        """
        Check job status at a fixed interval until the job leaves the queue.

        Returns:
            The final status, always FINISHED

        Raises:
            JobFailedError: If the job ends in any other state
        """
        status = self.get_status(job_id)
        while status in PENDING_STATES:
            logger.info(f"Job {job_id}: {status}")
            self._sleep(self.config.poll_interval)
            status = self.get_status(job_id)

        if status != FINISHED:
            raise JobFailedError(job_id, status)
        return status

    def get_result_types(self, job_id: str) -> List[ResultType]:
        response = self._request("GET", f"/resulttypes/{job_id}")
        return parse_result_types(response.text)

    def poll_results(
        self, job_id: str, outfile: Optional[str] = None, outformat: Optional[str] = None
    ) -> List[Union[Path, str]]:
        """
        Fetch job results and save them.

        Args:
            job_id: Job identifier
            outfile: Base name for result files, "-" writes to standard output
            outformat: Only fetch the result type with this identifier

        Returns:
            Paths of written files, or "-" for results sent to standard output
        """
        result_types = self.get_result_types(job_id)
        if outformat:
            result_types = [rt for rt in result_types if rt.identifier == outformat]
            if not result_types:
                logger.warning(f"No result of type {outformat} for job {job_id}")

        base_name = outfile or job_id
        written: List[Union[Path, str]] = []
        for result_type in result_types:
            response = self._request("GET", f"/result/{job_id}/{result_type.identifier}")

            if base_name == "-":
                sys.stdout.write(response.text)
                written.append("-")
                continue

            name_parts = [base_name, result_type.identifier]
            if result_type.file_suffix:
                name_parts.append(result_type.file_suffix)
            path = Path(".".join(name_parts))
            path.write_bytes(response.content)
            logger.info(f"Wrote {result_type.identifier} result to {path}")
            written.append(path)

        return written

    def client_version(self) -> str:
        return f"Wise2DBA JDispatcher client {__version__}"

    def client_license(self) -> str:
        return CLIENT_LICENSE
