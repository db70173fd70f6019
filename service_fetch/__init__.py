"""Async HTTP client facade for calling other services."""

from service_fetch.error_handler import ErrorHandler, ErrorSink, get_default_sink
from service_fetch.integrations.clients.real_http.fetch import FetchClient
from service_fetch.integrations.contracts.fetch import UploadFile
from service_fetch.integrations.policy.response_wrappers import (
    ServiceErrorResponse,
    ServiceReportedError,
    SuccessResponse,
    decode_service_response,
)
from service_fetch.utils.config_loader import FetchConfig, load_fetch_config

__all__ = [
    "ErrorHandler",
    "ErrorSink",
    "FetchClient",
    "FetchConfig",
    "ServiceErrorResponse",
    "ServiceReportedError",
    "SuccessResponse",
    "UploadFile",
    "decode_service_response",
    "get_default_sink",
    "load_fetch_config",
]
