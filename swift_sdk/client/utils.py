# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Utility functions for the Swift client.

This module provides the SDK logger, request tracing and timing helpers,
and query-string construction shared by the object operations.
"""

import logging
import os
import time
from typing import Mapping, Optional
from urllib.parse import urlencode

# Enable a debug trace for every outbound request if requested
TRACE_REQUESTS = os.environ.get('SWIFT_SDK_TRACE_REQUESTS', '').lower() in ('true', '1', 'yes')

def log_level(name):
    """Return the numeric level for a level name, or None for names logging does not know."""
    level = logging.getLevelName(name.upper()) if name else None
    return level if isinstance(level, int) else None

logger = logging.getLogger('SwiftSDK')
LOG_LEVEL = log_level(os.environ.get('SWIFT_SDK_LOG_LEVEL'))
if LOG_LEVEL is not None:
    logger.setLevel(LOG_LEVEL)
if TRACE_REQUESTS:
    logger.setLevel(logging.DEBUG)

def time_function(func_name, start_time):
    """
    Helper function for timing operations.

    Calculates and logs the elapsed time for a function call.

    Args:
        func_name (str): Name of the function being timed
        start_time (float): Start time from time.time()

    Returns:
        float: Elapsed time in seconds
    """
    elapsed = time.time() - start_time
    logger.info(f"{func_name} completed in {elapsed:.4f} seconds")
    return elapsed

def trace_request(method, url, **details):
    """
    Trace an outbound request for debugging purposes.

    Logs only when the SWIFT_SDK_TRACE_REQUESTS environment variable is set.
    Callers must not pass credentials in ``details``.

    Args:
        method (str): HTTP verb
        url (str): Target URL
        **details: Additional details to log
    """
    if TRACE_REQUESTS:
        detail_str = ', '.join(f"{k}={v}" for k, v in details.items())
        logger.debug(f"TRACE: {method} {url} {detail_str}")

def build_query(params: Optional[Mapping[str, str]]) -> str:
    """
    Build a query string from a flat mapping.

    Keys and values are percent-encoded and keep the mapping's order.

    Args:
        params (Optional[Mapping[str, str]]): Query parameters.

    Returns:
        str: ``"?k=v&..."``, or an empty string when there are no parameters.
    """
    if not params:
        return ""
    return "?" + urlencode(list(params.items()))
