# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Types Module.

This module defines the per-call option bundles accepted by the object
operations and the response wrapper they return.

Classes:
    ListOpts, DownloadOpts, CreateOpts, CopyOpts, DeleteOpts, GetOpts, UpdateOpts:
        Options for a single object operation.
    ObjectResponse: Typed view over a raw HTTP response.
"""
import io
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Iterator, Optional, Union

import httpx

# Prefix the service uses to carry user metadata in headers.
METADATA_PREFIX = "X-Object-Meta-"

Content = Union[bytes, bytearray, memoryview, BinaryIO]

@dataclass(frozen=True)
class ListOpts:
    """Options for listing the objects of a container."""
    container: str
    full: bool = False
    params: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class DownloadOpts:
    """Options for downloading an object."""
    container: str
    name: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class CreateOpts:
    """Options for creating or replacing an object."""
    container: str
    name: str
    content: Optional[Content] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class CopyOpts:
    """Options for copying an object to a new container and/or name."""
    container: str
    name: str
    new_container: str
    new_name: str
    metadata: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class DeleteOpts:
    """Options for deleting an object."""
    container: str
    name: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class GetOpts:
    """Options for fetching object metadata."""
    container: str
    name: str
    headers: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class UpdateOpts:
    """Options for setting, replacing or clearing object metadata."""
    container: str
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


class ObjectResponse:
    """
    Response returned by the List, Download and Get operations.

    Wraps the transport response so callers do not depend on ``httpx``
    internals. The body has already been read when this object is built.

    Attributes:
        method (str): HTTP verb of the request that produced this response.
        url (str): Final request URL.
    """

    def __init__(self, response: httpx.Response):
        self._response = response
        self.method = response.request.method
        self.url = str(response.request.url)

    def __repr__(self):
        return f"<ObjectResponse {self.method} {self.url} [{self.status_code}]>"

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        """All response headers, keys lowercased."""
        return dict(self._response.headers.items())

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up a single header, case-insensitively.

        Args:
            name (str): Header name.
            default (Optional[str]): Value returned when the header is absent.

        Returns:
            Optional[str]: The header value or ``default``.
        """
        return self._response.headers.get(name, default)

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    def stream(self) -> BinaryIO:
        """Return a binary file-like object positioned at the start of the body."""
        return io.BytesIO(self._response.content)

    def iter_bytes(self, chunk_size: Optional[int] = None) -> Iterator[bytes]:
        return self._response.iter_bytes(chunk_size)

    def metadata(self) -> Dict[str, str]:
        """
        Extract the user metadata carried by the response.

        Returns:
            Dict[str, str]: Header values whose names start with the metadata
            prefix, keyed by the remainder of the name as sent by the server.
        """
        encoding = self._response.headers.encoding
        prefix = METADATA_PREFIX.lower()
        metadata = {}
        for raw_key, raw_value in self._response.headers.raw:
            key = raw_key.decode(encoding)
            if key.lower().startswith(prefix):
                metadata[key[len(prefix):]] = raw_value.decode(encoding)
        return metadata
