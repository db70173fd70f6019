"""
Real HTTP Fetch Client.

Purpose:
- Calls other services with GET / POST / PUT / DELETE and multipart uploads
- Parses every response body as JSON
- Treats a JSON body carrying the service error envelope (isBoom + output) as a failure

Implementation notes:
- Uses httpx for async requests, one AsyncClient per call, with no timeout
- HTTP status codes are not inspected; the envelope decides success
- Transport and body decoding errors (JSON or charset) propagate untouched and are not logged here
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from service_fetch.error_handler import ErrorHandler, ErrorSink, get_default_sink
from service_fetch.integrations.contracts.fetch import QueryParams, UploadFile
from service_fetch.integrations.policy.response_wrappers import (
    ServiceErrorResponse,
    decode_service_response,
    unwrap_service_response,
)
from service_fetch.utils.config_loader import FetchConfig

logger = logging.getLogger(__name__)


class FetchClient:
    def __init__(
        self,
        sink: Optional[ErrorSink] = None,
        *,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or FetchConfig()
        self.error_handler = ErrorHandler(
            sink if sink is not None else get_default_sink(self.config.logger_name, self.config.log_level)
        )
        self.transport = transport

    async def get(self, url: str, params: Optional[QueryParams] = None) -> Any:
        """Fetch a service url and return its JSON data.

        ``params`` replaces the query string of ``url``.
        """
        target = httpx.URL(url, params=params) if params is not None else httpx.URL(url)
        return await self._request("GET", target)

    async def post(self, url: str, body: Any) -> Any:
        return await self._request("POST", url, content=_encode_json(body), headers=self.config.default_headers)

    async def put(self, url: str, body: Any) -> Any:
        return await self._request("PUT", url, content=_encode_json(body), headers=self.config.default_headers)

    async def delete(self, url: str) -> Any:
        return await self._request("DELETE", url)

    async def upload(self, url: str, file: Union[UploadFile, Mapping[str, Any]]) -> Any:
        """Forward a file as multipart/form-data.

        No Content-Type header is set here so httpx can write the boundary.
        """
        if not isinstance(file, UploadFile):
            file = UploadFile(**file)
        files = {"file": (file.originalname, file.buffer, file.mimetype)}
        return await self._request("POST", url, data=file.form_fields(), files=files)

    async def _request(self, method: str, url: Union[str, httpx.URL], **kwargs: Any) -> Any:
        logger.debug("%s %s", method, url)
        async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
            response = await client.request(method, url, **kwargs)
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        data = response.json()
        decoded = decode_service_response(
            data,
            marker_field=self.config.error_marker_field,
            diagnostic_field=self.config.diagnostic_field,
        )
        if isinstance(decoded, ServiceErrorResponse):
            self.error_handler.report(decoded.output)
        return unwrap_service_response(decoded)


def _encode_json(body: Any) -> bytes:
    # None is sent as a JSON null, not as an empty body
    return json.dumps(body).encode("utf-8")

