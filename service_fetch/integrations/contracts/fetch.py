"""
Fetch contracts.

Defines the request-side structures handed to FetchClient:
- the uploaded file descriptor sent by FetchClient.upload(...)
- the query mapping accepted by FetchClient.get(...)

The upload descriptor mirrors what an upstream multipart parser hands over for an
incoming file (buffer, encoding, mimetype, originalname, size), so a file received
by one service can be forwarded to another unchanged.
"""

from __future__ import annotations

import mimetypes
import os
from typing import Dict, Mapping, Optional, Union

from pydantic import BaseModel, Field, model_validator

QueryParams = Mapping[str, str]

DEFAULT_MIMETYPE = "application/octet-stream"


class UploadFile(BaseModel):
    """A file ready to be forwarded as a multipart form."""

    buffer: bytes
    encoding: str = "7bit"
    mimetype: str = DEFAULT_MIMETYPE
    originalname: str
    size: int = Field(ge=0)

    @model_validator(mode="after")
    def _size_matches_buffer(self) -> "UploadFile":
        if self.size != len(self.buffer):
            raise ValueError(f"size {self.size} does not match buffer length {len(self.buffer)}")
        return self

    @classmethod
    def from_path(
        cls,
        path: Union[str, os.PathLike],
        encoding: str = "7bit",
        mimetype: Optional[str] = None,
    ) -> "UploadFile":
        name = os.path.basename(os.fspath(path))
        with open(path, "rb") as f:
            data = f.read()
        return cls(
            buffer=data,
            encoding=encoding,
            mimetype=mimetype or mimetypes.guess_type(name)[0] or DEFAULT_MIMETYPE,
            originalname=name,
            size=len(data),
        )

    def form_fields(self) -> Dict[str, str]:
        """Scalar form fields sent next to the file part."""
        return {
            "encoding": self.encoding,
            "mimetype": self.mimetype,
            "originalname": self.originalname,
            "size": str(self.size),
        }


__all__ = ["DEFAULT_MIMETYPE", "QueryParams", "UploadFile"]
