"""
Conversion Engine Module
========================
HTTP client for the remote conversion endpoint.
"""

from .client import ConversionClient, GENERIC_FAILURE_MESSAGE

__all__ = ["ConversionClient", "GENERIC_FAILURE_MESSAGE"]
