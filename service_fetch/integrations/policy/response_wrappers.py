from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel

DEFAULT_MARKER_FIELD = "isBoom"
DEFAULT_DIAGNOSTIC_FIELD = "output"


class ServiceReportedError(RuntimeError):
    """A downstream service answered with its error envelope."""

    def __init__(self, output: Any, *, response: Any = None) -> None:
        super().__init__(_describe(output))
        self.output = output
        self.response = response


class ServiceErrorResponse(BaseModel):
    output: Any = None
    raw: Any = None


class SuccessResponse(BaseModel):
    data: Any = None


ServiceResponse = Union[ServiceErrorResponse, SuccessResponse]


def decode_service_response(
    data: Any,
    *,
    marker_field: str = DEFAULT_MARKER_FIELD,
    diagnostic_field: str = DEFAULT_DIAGNOSTIC_FIELD,
) -> ServiceResponse:
    """Tag a parsed body as a service error or a success.

    Only JSON objects can carry the marker; any other body is a success.
    """
    if isinstance(data, Mapping) and data.get(marker_field):
        return ServiceErrorResponse(output=data.get(diagnostic_field), raw=data)
    return SuccessResponse(data=data)


def unwrap_service_response(response: ServiceResponse) -> Any:
    if isinstance(response, ServiceErrorResponse):
        raise ServiceReportedError(response.output, response=response.raw)
    return response.data


def _describe(output: Any) -> str:
    if isinstance(output, Mapping) and output.get("message"):
        return str(output["message"])
    if isinstance(output, Mapping) and isinstance(output.get("payload"), Mapping):
        # Boom envelopes nest the message under output.payload
        message = output["payload"].get("message")
        if message:
            return str(message)
    return str(output)
