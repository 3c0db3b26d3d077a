# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from .client import Session, SwiftClient
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    ContentReadError,
    ObjectError,
    RequestError,
    SwiftError,
)
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

__all__ = [
    "Session",
    "SwiftClient",
    "SwiftError",
    "AuthenticationError",
    "ConfigurationError",
    "ContentReadError",
    "ObjectError",
    "RequestError",
    "CopyOpts",
    "CreateOpts",
    "DeleteOpts",
    "DownloadOpts",
    "GetOpts",
    "ListOpts",
    "ObjectResponse",
    "UpdateOpts",
]
