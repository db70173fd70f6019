"""
Real HTTP integration clients.

These clients communicate with other services over HTTP.

Important:
- Responses are returned as parsed JSON
- Service error envelopes are raised as ServiceReportedError
"""

from .fetch import FetchClient

__all__ = ["FetchClient"]
