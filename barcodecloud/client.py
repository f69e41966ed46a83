"""HTTP plumbing shared by the barcode cloud API services."""

from __future__ import annotations

import dataclasses
import enum
import json
import os
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

import requests

JSON_MIME = "application/json"
MULTIPART_MIME = "multipart/form-data"
URLENCODED_MIME = "application/x-www-form-urlencoded"
OCTET_STREAM_MIME = "application/octet-stream"

QueryLike = Mapping[str, Any] | Iterable[tuple[str, Any]] | None
ErrorModels = Mapping[int, Callable[[Any], Any]] | None


class ApiError(Exception):
    """Raised when the server answers with a status of 300 or above."""

    def __init__(self, status, status_code, text, model=None):
        super().__init__(status)
        self.status = status
        self.status_code = status_code
        self.text = text
        self.model = model

    def __str__(self) -> str:
        return self.status


def parameter_to_string(value) -> str:
    """Render a query or form value the way the service expects it."""
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode()
    if isinstance(value, (list, tuple)):
        return ",".join(parameter_to_string(item) for item in value)
    return str(value)


def select_header_content_type(choices) -> str:
    """Pick a Content-Type: JSON when offered, otherwise the first choice."""
    choices = list(choices or ())
    if not choices:
        return ""
    if JSON_MIME in choices:
        return JSON_MIME
    return choices[0]


def select_header_accept(choices) -> str:
    """Pick an Accept value: JSON when offered, otherwise all choices joined."""
    choices = list(choices or ())
    if not choices:
        return ""
    if JSON_MIME in choices:
        return JSON_MIME
    return ",".join(choices)


def _encode_pairs(values: QueryLike) -> list[tuple[str, str]]:
    if not values:
        return []
    items = values.items() if isinstance(values, Mapping) else values
    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            pairs.extend((key, parameter_to_string(item)) for item in value)
        else:
            pairs.append((key, parameter_to_string(value)))
    return pairs


def _to_jsonable(body: Any) -> Any:
    if hasattr(body, "to_dict") and callable(body.to_dict):
        return body.to_dict()
    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        return dataclasses.asdict(body)
    if isinstance(body, enum.Enum):
        return body.value
    if isinstance(body, (list, tuple)):
        return [_to_jsonable(item) for item in body]
    if isinstance(body, Mapping):
        return {key: _to_jsonable(value) for key, value in body.items()}
    return body


class ApiClient:
    """Sends requests to the service and turns answers into values or errors."""

    def __init__(self, base_path, session=None, access_token=None):
        self.base_path = base_path
        self.session = session if session is not None else requests.Session()
        self.access_token = access_token

    def _send(
        self,
        method: str,
        path: str,
        *,
        query: QueryLike = None,
        form: QueryLike = None,
        body: Any = None,
        file_name: str | None = None,
        file_field: str | None = None,
        file_bytes: bytes | None = None,
        content_types: Iterable[str] = (),
        accepts: Iterable[str] = (),
    ) -> requests.Response:
        headers: dict[str, str] = {}
        accept = select_header_accept(accepts)
        if accept:
            headers["Accept"] = accept
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        content_type = select_header_content_type(content_types)
        mime = content_type.split(";")[0].strip().lower()
        form_pairs = _encode_pairs(form)
        kwargs: dict[str, Any] = {}

        if mime == MULTIPART_MIME:
            parts: list[tuple[str, tuple[Any, ...]]] = [
                (key, (None, value)) for key, value in form_pairs
            ]
            if file_bytes is not None:
                upload_name = os.path.basename(file_name) if file_name else "file"
                parts.append((file_field or "file", (upload_name, file_bytes)))
            if parts:
                kwargs["files"] = parts
        elif mime == URLENCODED_MIME and form_pairs:
            headers["Content-Type"] = content_type
            kwargs["data"] = form_pairs
        elif body is not None:
            headers["Content-Type"] = content_type or JSON_MIME
            kwargs["data"] = json.dumps(_to_jsonable(body)).encode()
        elif file_bytes is not None:
            headers["Content-Type"] = OCTET_STREAM_MIME
            kwargs["data"] = file_bytes
        elif content_type:
            headers["Content-Type"] = content_type

        return self.session.request(
            method.upper(),
            self.base_path + path,
            params=_encode_pairs(query),
            headers=headers,
            **kwargs,
        )

    @staticmethod
    def _raise_for_status(response: requests.Response, error_models: ErrorModels = None) -> None:
        if response.status_code < 300:
            return
        status = f"{response.status_code} {response.reason or ''}".strip()
        error = ApiError(status, response.status_code, response.text)
        factory = (error_models or {}).get(response.status_code)
        if factory is not None:
            try:
                error.model = factory(json.loads(response.content))
            except (ValueError, TypeError, KeyError) as exc:
                error.status = str(exc)
        raise error

    def call(
        self,
        method,
        path,
        *,
        query=None,
        form=None,
        body=None,
        file_name=None,
        file_field=None,
        file_bytes=None,
        content_types=(),
        accepts=(),
    ) -> requests.Response:
        """Send a request whose answer carries no value; raise ApiError on failure."""
        response = self._send(
            method,
            path,
            query=query,
            form=form,
            body=body,
            file_name=file_name,
            file_field=file_field,
            file_bytes=file_bytes,
            content_types=content_types,
            accepts=accepts,
        )
        self._raise_for_status(response)
        return response

    def call_json(
        self,
        method,
        path,
        *,
        query=None,
        form=None,
        body=None,
        file_name=None,
        file_field=None,
        file_bytes=None,
        content_types=(),
        accepts=(),
        error_models=None,
    ) -> Any:
        """Send a request and return its decoded JSON answer."""
        response = self._send(
            method,
            path,
            query=query,
            form=form,
            body=body,
            file_name=file_name,
            file_field=file_field,
            file_bytes=file_bytes,
            content_types=content_types,
            accepts=accepts,
        )
        self._raise_for_status(response, error_models)
        try:
            return json.loads(response.content)
        except ValueError as exc:
            raise ApiError(str(exc), response.status_code, response.text) from exc

    def call_bytes(
        self,
        method,
        path,
        *,
        query=None,
        body=None,
        content_types=(),
        accepts=(),
        error_models=None,
    ) -> bytes:
        """Send a request and return the raw bytes of its answer."""
        response = self._send(
            method,
            path,
            query=query,
            body=body,
            content_types=content_types,
            accepts=accepts,
        )
        self._raise_for_status(response, error_models)
        return response.content