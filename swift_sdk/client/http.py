# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
HTTP Module.

This module issues the single HTTP request behind each object operation.
It applies headers in a fixed order, sends the request through ``httpx`` and
converts transport failures and non-2xx responses into ``RequestError``.
Nothing is retried.

Classes:
    RequestOptions: Headers, Accept override and body for one request.
    HTTPExecutor: Sends requests and wraps the responses.
"""
import time
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

from .exceptions import RequestError
from .types import ObjectResponse
from .utils import logger, time_function, trace_request

DEFAULT_ACCEPT = "application/json"
HEADER_ENCODING = "utf-8"

@dataclass(frozen=True)
class RequestOptions:
    """Per-request options handed to the executor."""
    more_headers: Mapping[str, str] = field(default_factory=dict)
    accept: Optional[str] = None
    body: Optional[bytes] = None

def merge_headers(*layers: Optional[Mapping[str, str]]) -> httpx.Headers:
    """
    Merge header layers into a new collection, later layers winning.

    Names are compared case-insensitively, so a later ``destination`` replaces
    an earlier ``Destination``. Values are encoded as UTF-8.

    Args:
        *layers (Optional[Mapping[str, str]]): Header mappings, lowest
            precedence first. None and empty layers are skipped.

    Returns:
        httpx.Headers: The merged headers.
    """
    merged = httpx.Headers(encoding=HEADER_ENCODING)
    for layer in layers:
        if not layer:
            continue
        if not isinstance(layer, httpx.Headers):
            layer = httpx.Headers(layer, encoding=HEADER_ENCODING)
        merged.update(layer)
    return merged

def _convert_http_error(e: httpx.HTTPError, method: str, url: str) -> RequestError:
    """
    Convert an ``httpx`` error to a ``RequestError``.

    Args:
        e (httpx.HTTPError): The error raised by ``httpx``.
        method (str): HTTP verb of the failed request.
        url (str): Target URL of the failed request.

    Returns:
        RequestError: The converted error, with status and response attached
        when the server answered.
    """
    if isinstance(e, httpx.HTTPStatusError):
        status = e.response.status_code
        return RequestError(
            f"{method} {url} returned unexpected status {status}",
            status_code=status,
            response=ObjectResponse(e.response),
        )
    return RequestError(f"{method} {url} failed: {e}")

class HTTPExecutor:
    """
    Sends one HTTP request per call.

    Args:
        http_client (httpx.Client): Client used for all requests. The executor
            does not own it and never closes it.
    """

    def __init__(self, http_client: httpx.Client):
        self._http_client = http_client

    def request(self, method: str, url: str, options: Optional[RequestOptions] = None) -> ObjectResponse:
        """
        Send a request and return its response.

        Headers are applied as: default Accept, then ``more_headers``, then the
        ``accept`` override when one is given.

        Args:
            method (str): HTTP verb.
            url (str): Absolute target URL, query string included.
            options (Optional[RequestOptions]): Headers and body.

        Returns:
            ObjectResponse: The response, for 2xx status codes only.

        Raises:
            RequestError: If the request cannot be sent or the status is not 2xx.
        """
        options = options or RequestOptions()
        headers = merge_headers(
            {"Accept": DEFAULT_ACCEPT},
            options.more_headers,
            {"Accept": options.accept} if options.accept else None,
        )

        body_size = len(options.body) if options.body is not None else 0
        trace_request(method, url, accept=headers["Accept"], body_bytes=body_size)
        start_time = time.time()
        try:
            response = self._http_client.request(method, url, headers=headers, content=options.body)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise _convert_http_error(e, method, url) from e
        time_function(f"{method} {url}", start_time)
        return ObjectResponse(response)
