"""Shared HTTP helpers for provider and extraction clients.

All network calls are one-shot: a client is opened per request unless the
caller injected one (tests, or a caller that manages its own client).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Mapping, Optional, Type

import httpx

from .exceptions import ErrorKind, LyricastError

STATUS_KINDS: Dict[int, ErrorKind] = {
    400: ErrorKind.INVALID_REQUEST,
    403: ErrorKind.QUOTA_EXCEEDED,
    404: ErrorKind.SERVICE_NOT_FOUND,
    429: ErrorKind.RATE_LIMITED,
    503: ErrorKind.SERVICE_UNAVAILABLE,
}


def classify_status(
    status: int,
    default: ErrorKind = ErrorKind.HTTP_ERROR,
    overrides: Optional[Mapping[int, ErrorKind]] = None,
) -> ErrorKind:
    """Map an HTTP error status to an ErrorKind."""
    if overrides and status in overrides:
        return overrides[status]
    if status in STATUS_KINDS:
        return STATUS_KINDS[status]
    if status >= 500:
        return ErrorKind.SERVER_ERROR
    return default


def safe_json(response: httpx.Response) -> Any:
    """Decode a JSON body, returning an empty dict for non-JSON bodies."""
    try:
        return response.json()
    except ValueError:
        return {}


def as_int(value: Any) -> Optional[int]:
    """Coerce a status code from a JSON body, or None."""
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def payload_message(payload: Any) -> Optional[str]:
    """Pull a human-readable message out of an error body, if there is one."""
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict):
        nested = error.get("message")
        if isinstance(nested, str) and nested:
            return nested
    return None


@asynccontextmanager
async def open_client(
    client: Optional[httpx.AsyncClient], timeout: float
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or a one-shot client closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(
        timeout=timeout, headers={"Content-Type": "application/json"}
    ) as one_shot:
        yield one_shot


async def send(
    client: Optional[httpx.AsyncClient],
    method: str,
    url: str,
    *,
    timeout: float,
    error_cls: Type[LyricastError],
    service: str,
    **kwargs: Any,
) -> httpx.Response:
    """
    Send one request and translate transport failures into classified errors.

    HTTP error statuses are returned to the caller untouched so each client
    can apply its own status table.

    Raises:
        error_cls: TIMEOUT, NETWORK_ERROR or SERVICE_UNAVAILABLE
    """
    try:
        async with open_client(client, timeout) as http:
            return await http.request(method, url, timeout=timeout, **kwargs)
    except httpx.TimeoutException as e:
        raise error_cls(f"{service} timeout. Please try again", ErrorKind.TIMEOUT) from e
    except httpx.ConnectError as e:
        raise error_cls(
            "Network error. Please check your connection", ErrorKind.NETWORK_ERROR
        ) from e
    except httpx.HTTPError as e:
        raise error_cls(
            f"{service} service unavailable", ErrorKind.SERVICE_UNAVAILABLE
        ) from e
