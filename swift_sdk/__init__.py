# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Python SDK for the object operations of a Swift-style object storage API.
"""
from .client import Session, SwiftClient

__version__ = "0.1.0"

__all__ = ["Session", "SwiftClient"]
