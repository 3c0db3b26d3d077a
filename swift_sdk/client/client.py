# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Client Module.

This module provides the session configuration and the client handle used by
the object operations. The client produces auth headers and container/object
URLs, and owns the HTTP connection pool.

Classes:
    Session: Immutable connection settings.
    SwiftClient: Client handle exposing the object operations as methods.
"""
import os
from dataclasses import dataclass
from typing import Callable, Dict, Optional
from urllib.parse import quote

import httpx

from . import objects
from .exceptions import AuthenticationError, ConfigurationError
from .http import HTTPExecutor
from .types import (
    CopyOpts,
    CreateOpts,
    DeleteOpts,
    DownloadOpts,
    GetOpts,
    ListOpts,
    ObjectResponse,
    UpdateOpts,
)
from .utils import logger

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "swift-sdk-python/0.1.0"

def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.lower() in ("1", "true", "t", "yes", "y", "on")

@dataclass(frozen=True)
class Session:
    """
    Connection settings for a storage account.

    Attributes:
        storage_url (str): Account endpoint, e.g. ``https://host/v1/AUTH_acct``.
        auth_token (Optional[str]): Static auth token.
        token_provider (Optional[Callable[[], str]]): Called for a token on each
            request when no static token is set. Token acquisition and refresh
            belong to the provider.
        timeout (float): Transport timeout in seconds.
        verify_ssl (bool): Verify TLS certificates.
        user_agent (str): User-Agent header value.
    """
    storage_url: str
    auth_token: Optional[str] = None
    token_provider: Optional[Callable[[], str]] = None
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    user_agent: str = USER_AGENT

    def __post_init__(self):
        if not self.storage_url:
            raise ConfigurationError("storage_url is required")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_environment(cls, **overrides) -> "Session":
        """
        Build a session from ``SWIFT_*`` environment variables.

        Reads SWIFT_STORAGE_URL (required), SWIFT_AUTH_TOKEN, SWIFT_TIMEOUT
        and SWIFT_VERIFY_SSL. Keyword arguments override the environment.

        Returns:
            Session: The configured session.

        Raises:
            ConfigurationError: If a value is missing or malformed.
        """
        raw_timeout = os.environ.get("SWIFT_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"SWIFT_TIMEOUT must be a number, got {raw_timeout!r}") from e

        settings = {
            "storage_url": os.environ.get("SWIFT_STORAGE_URL", ""),
            "auth_token": os.environ.get("SWIFT_AUTH_TOKEN") or None,
            "timeout": timeout,
            "verify_ssl": _as_bool(os.environ.get("SWIFT_VERIFY_SSL"), True),
        }
        settings.update(overrides)
        if not settings["storage_url"]:
            raise ConfigurationError("SWIFT_STORAGE_URL is not set")
        return cls(**settings)

class SwiftClient:
    """
    Client for the object operations of a storage account.

    The client is safe to share between threads as long as each call uses
    its own options bundle.

    Args:
        session (Optional[Session]): Connection settings. Defaults to
            ``Session.from_environment()``.
        http_client (Optional[httpx.Client]): Client to send requests with.
            When omitted one is created from the session and closed by
            ``close()``.
    """

    def __init__(self, session: Optional[Session] = None, http_client: Optional[httpx.Client] = None):
        self.session = session or Session.from_environment()
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=self.session.timeout, verify=self.session.verify_ssl)
        self._http_client = http_client
        self.executor = HTTPExecutor(http_client)
        logger.info(f"SwiftClient initialized for {self.session.storage_url}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the HTTP connection pool if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def get_headers(self) -> Dict[str, str]:
        """
        Produce the base headers for a request.

        Returns:
            Dict[str, str]: A new mapping holding the auth token and User-Agent.

        Raises:
            AuthenticationError: If no token is configured or the provider
                returned an empty token.
        """
        token = self.session.auth_token
        if not token and self.session.token_provider is not None:
            token = self.session.token_provider()
        if not token:
            raise AuthenticationError("no auth token available")
        return {"X-Auth-Token": token, "User-Agent": self.session.user_agent}

    def get_account_url(self) -> str:
        return self.session.storage_url.rstrip("/")

    def get_container_url(self, container: str) -> str:
        return f"{self.get_account_url()}/{quote(container, safe='')}"

    def get_object_url(self, container: str, name: str) -> str:
        # Object names may contain "/" as pseudo-directory separators.
        return f"{self.get_container_url(container)}/{quote(name, safe='/')}"

    def list_objects(self, opts: ListOpts) -> ObjectResponse:
        return objects.list_objects(self, opts)

    def download_object(self, opts: DownloadOpts) -> ObjectResponse:
        return objects.download_object(self, opts)

    def create_object(self, opts: CreateOpts) -> None:
        objects.create_object(self, opts)

    def copy_object(self, opts: CopyOpts) -> None:
        objects.copy_object(self, opts)

    def delete_object(self, opts: DeleteOpts) -> None:
        objects.delete_object(self, opts)

    def get_object(self, opts: GetOpts) -> ObjectResponse:
        return objects.get_object(self, opts)

    def update_object(self, opts: UpdateOpts) -> None:
        objects.update_object(self, opts)
