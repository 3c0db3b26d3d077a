# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Object Operations Module.

This module turns each object operation into exactly one HTTP request.
Every function takes a client handle providing ``get_headers()``,
``get_container_url()``, ``get_object_url()`` and an ``executor``, plus the
operation's options bundle.

Headers are built fresh for every call, in this order (later wins):
client defaults, custom headers, then metadata headers.

Functions:
    list_objects: GET the container listing.
    download_object: GET an object's content and metadata.
    create_object: PUT a new object or replace an existing one.
    copy_object: COPY an object to a new container and/or name.
    delete_object: DELETE an object.
    get_object: HEAD an object to read its metadata.
    update_object: POST new metadata for an object.
"""
from typing import Mapping, Optional

import httpx

from .exceptions import ContentReadError
from .http import RequestOptions, merge_headers
from .types import (
    METADATA_PREFIX,
    Content,
    CopyOpts,
    CreateOpts,
    DeleteOpts,
    DownloadOpts,
    GetOpts,
    ListOpts,
    ObjectResponse,
    UpdateOpts,
)
from .utils import build_query, logger

PLAIN_TEXT = "text/plain"

def _build_headers(
    client,
    headers: Optional[Mapping[str, str]] = None,
    metadata: Optional[Mapping[str, str]] = None,
) -> httpx.Headers:
    metadata_headers = {METADATA_PREFIX + key: value for key, value in (metadata or {}).items()}
    return merge_headers(client.get_headers(), headers, metadata_headers)

def _drain_content(content: Optional[Content]) -> Optional[bytes]:
    """
    Read an upload source fully into memory.

    The declared length is ``len(content)`` when available, otherwise what
    remains between the current position and the end of a seekable source.
    Sources with neither are read to EOF.

    Args:
        content (Optional[Content]): Bytes or a readable binary source.

    Returns:
        Optional[bytes]: The body, or None when there is no content.

    Raises:
        ContentReadError: If the source yields fewer bytes than declared or
            reading fails.
        TypeError: If ``content`` is neither bytes-like nor readable.
    """
    if content is None:
        return None
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    if not hasattr(content, "read"):
        raise TypeError(f"content must be bytes or a readable binary source, got {type(content).__name__}")

    try:
        if hasattr(content, "__len__"):
            declared = len(content)
        elif getattr(content, "seekable", lambda: False)():
            position = content.tell()
            declared = content.seek(0, 2) - position
            content.seek(position)
        else:
            return content.read()

        chunks = []
        remaining = declared
        while remaining > 0:
            chunk = content.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except OSError as e:
        raise ContentReadError(f"failed to read content: {e}") from e

    if remaining > 0:
        raise ContentReadError(
            f"content declared {declared} bytes but only {declared - remaining} could be read"
        )
    return b"".join(chunks)

def list_objects(client, opts: ListOpts) -> ObjectResponse:
    """
    List the objects in a container.

    With ``opts.full`` false the listing is requested as plain text, one
    object name per line. Otherwise the service's structured listing is
    requested.

    Args:
        client: Client handle.
        opts (ListOpts): Container, listing mode and query parameters.

    Returns:
        ObjectResponse: The listing response, body unparsed.

    Raises:
        AuthenticationError: If the client cannot produce headers.
        RequestError: If the request fails.
    """
    headers = _build_headers(client)
    accept = None if opts.full else PLAIN_TEXT
    url = client.get_container_url(opts.container) + build_query(opts.params)
    logger.debug(f"Listing objects in {opts.container}")
    return client.executor.request("GET", url, RequestOptions(more_headers=headers, accept=accept))

def download_object(client, opts: DownloadOpts) -> ObjectResponse:
    """
    Retrieve the content and metadata of an object.

    Returns:
        ObjectResponse: The response carrying the object body.
    """
    headers = _build_headers(client, opts.headers)
    url = client.get_object_url(opts.container, opts.name) + build_query(opts.params)
    logger.debug(f"Downloading {opts.container}/{opts.name}")
    return client.executor.request("GET", url, RequestOptions(more_headers=headers))

def create_object(client, opts: CreateOpts) -> None:
    """
    Create a new object or replace an existing one.

    The content source is read fully before the request is sent, so a short
    source never results in a truncated upload.

    Args:
        client: Client handle.
        opts (CreateOpts): Target, content, metadata, headers and parameters.

    Raises:
        AuthenticationError: If the client cannot produce headers.
        ContentReadError: If the content cannot be fully read.
        RequestError: If the request fails.
    """
    headers = _build_headers(client, opts.headers, opts.metadata)
    body = _drain_content(opts.content)
    url = client.get_object_url(opts.container, opts.name) + build_query(opts.params)
    logger.debug(f"Creating {opts.container}/{opts.name} ({len(body) if body else 0} bytes)")
    client.executor.request("PUT", url, RequestOptions(more_headers=headers, body=body))

def copy_object(client, opts: CopyOpts) -> None:
    """
    Copy an object server-side.

    The Destination header is always ``/<new_container>/<new_name>`` and
    replaces any caller-supplied value.
    """
    headers = _build_headers(client, opts.headers, opts.metadata)
    headers["Destination"] = f"/{opts.new_container}/{opts.new_name}"
    url = client.get_object_url(opts.container, opts.name)
    logger.debug(f"Copying {opts.container}/{opts.name} to {headers['Destination']}")
    client.executor.request("COPY", url, RequestOptions(more_headers=headers))

def delete_object(client, opts: DeleteOpts) -> None:
    headers = _build_headers(client, opts.headers)
    url = client.get_object_url(opts.container, opts.name) + build_query(opts.params)
    logger.debug(f"Deleting {opts.container}/{opts.name}")
    client.executor.request("DELETE", url, RequestOptions(more_headers=headers))

def get_object(client, opts: GetOpts) -> ObjectResponse:
    """
    Fetch an object's metadata without its content.

    Returns:
        ObjectResponse: The HEAD response; see ``ObjectResponse.metadata()``.
    """
    headers = _build_headers(client, opts.headers)
    url = client.get_object_url(opts.container, opts.name)
    logger.debug(f"Fetching metadata of {opts.container}/{opts.name}")
    return client.executor.request("HEAD", url, RequestOptions(more_headers=headers))

def update_object(client, opts: UpdateOpts) -> None:
    """
    Create, update or delete an object's metadata.

    Metadata not sent is removed by the service. Send an empty value to clear
    a single key.
    """
    headers = _build_headers(client, opts.headers, opts.metadata)
    url = client.get_object_url(opts.container, opts.name)
    logger.debug(f"Updating metadata of {opts.container}/{opts.name}")
    client.executor.request("POST", url, RequestOptions(more_headers=headers))
