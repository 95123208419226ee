"""Sync HTTP transport: dispatch, status evaluation, and body decoding."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from typing import Protocol, TypeVar

import httpx

from ..config import AgentConfig, TransportConfig
from .errors import PaymentDecodeError, PaymentTransportError
from .request import RequestDescriptor
from .response_checking import CheckableResponse, check_response
from .transport_shared import (
    DRAIN_LIMIT_BYTES,
    RawSink,
    build_default_headers,
    build_default_timeout,
    is_raw_sink,
)

logger = logging.getLogger("payment_agent")

T = TypeVar("T")

Decoder = Callable[[object], T]


class StreamingResponse(CheckableResponse, Protocol):
    is_stream_consumed: bool
    is_closed: bool

    def iter_bytes(self, chunk_size: int | None = None) -> Iterator[bytes]: ...
    def iter_raw(self, chunk_size: int | None = None) -> Iterator[bytes]: ...
    def close(self) -> None: ...


class TransportClient(Protocol):
    follow_redirects: bool
    timeout: httpx.Timeout

    def build_request(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Request: ...

    def send(self, request: httpx.Request, *, stream: bool = False) -> StreamingResponse: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the payment API.

    The underlying client is shared by every caller and is safe for
    concurrent sends. ``_client_lock`` is only taken to reconfigure or
    close the client; ordinary sends never wait on it.
    """

    def __init__(
        self,
        config: AgentConfig | None = None,
        *,
        client: TransportClient | None = None,
    ) -> None:
        self._config = config or AgentConfig()
        self._client_lock = threading.Lock()
        self._closed = False

        self._owns_client = client is None
        transport_config = self._config.transport
        self._client = client or httpx.Client(
            headers=build_default_headers(),
            timeout=build_default_timeout(transport_config),
            follow_redirects=transport_config.follow_redirects,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def follow_redirects(self) -> bool:
        return self._client.follow_redirects

    def set_follow_redirects(self, follow: bool) -> None:
        with self._client_lock:
            self._client.follow_redirects = follow

    def set_timeout(self, config: TransportConfig) -> None:
        config.validate()
        with self._client_lock:
            self._client.timeout = build_default_timeout(config)

    def close(self) -> None:
        with self._client_lock:
            if self._closed:
                return
            self._closed = True
            if self._owns_client:
                self._client.close()

    def send(
        self,
        descriptor: RequestDescriptor,
        destination: RawSink | Decoder[T] | None = None,
    ) -> T | int | None:
        """Send ``descriptor`` and process the response.

        ``destination`` selects what happens to a successful body:

        * ``None``: the body is discarded and ``None`` is returned.
        * a :class:`RawSink`: the body is written to it verbatim and the
          number of bytes written is returned.
        * any other callable: the body is parsed as JSON and the callable's
          result is returned. An empty body returns ``None``.

        Non-2xx responses raise :class:`ErrorResponse`. The response is
        always closed before this method returns.
        """

        if self._closed:
            raise PaymentTransportError("transport is already closed")
        if isinstance(destination, type) and hasattr(destination, "write"):
            raise TypeError("destination must be a RawSink instance, not a class")
        if destination is not None and not is_raw_sink(destination) and not callable(destination):
            raise TypeError("destination must be None, a RawSink, or a decoder callable")

        method = descriptor.method
        url = str(descriptor.url)
        logger.debug("request start method=%s url=%s", method, url)

        client = self._client
        request = client.build_request(
            method,
            descriptor.url,
            headers=descriptor.headers,
            content=descriptor.content,
        )
        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                method,
                url,
                exc.__class__.__name__,
            )
            raise PaymentTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        try:
            return self._handle_response(response, destination, method=method, url=url)
        finally:
            _release(response)

    def _handle_response(
        self,
        response: StreamingResponse,
        destination: RawSink | Decoder[T] | None,
        *,
        method: str,
        url: str,
    ) -> T | int | None:
        http_status = response.status_code
        logger.debug(
            "response received method=%s url=%s http_status=%s",
            method,
            url,
            http_status,
        )

        error = check_response(response)
        if error is not None:
            logger.error(
                "request failed method=%s url=%s http_status=%s",
                method,
                url,
                http_status,
            )
            raise error

        if destination is None:
            result: T | int | None = None
        elif is_raw_sink(destination):
            result = _copy_body(response, destination)
        else:
            result = _decode_body(response, destination)

        logger.info("request success method=%s url=%s http_status=%s", method, url, http_status)
        return result


def _copy_body(response: StreamingResponse, sink: RawSink) -> int:
    written = 0
    try:
        for chunk in response.iter_bytes():
            sink.write(chunk)
            written += len(chunk)
    except httpx.HTTPError as exc:
        raise PaymentTransportError(
            "network error while streaming response body",
            cause="network",
        ) from exc
    return written


def _decode_body(response: StreamingResponse, decoder: Decoder[T]) -> T | None:
    http_status = response.status_code
    try:
        data = response.read()
    except httpx.HTTPError as exc:
        raise PaymentTransportError(
            "network error while reading response body",
            cause="network",
        ) from exc

    if not data.strip():
        return None

    try:
        payload = json.loads(data)
    except ValueError as exc:
        logger.error("response parse error http_status=%s", http_status)
        raise PaymentDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc

    try:
        return decoder(payload)
    except (TypeError, ValueError, KeyError, AttributeError) as exc:
        logger.error("response decode error http_status=%s error=%s", http_status, exc)
        raise PaymentDecodeError(
            f"response payload could not be decoded: {exc}",
            http_status=http_status,
        ) from exc


def _release(response: StreamingResponse) -> None:
    """Drain a bounded prefix of any unread body, then close the response."""

    try:
        if not response.is_stream_consumed and not response.is_closed:
            drained = 0
            for chunk in response.iter_raw(DRAIN_LIMIT_BYTES):
                drained += len(chunk)
                if drained >= DRAIN_LIMIT_BYTES:
                    break
    except httpx.HTTPError as exc:
        logger.debug("response drain failed error=%s", exc.__class__.__name__)
    finally:
        response.close()


__all__ = [
    "Decoder",
    "StreamingResponse",
    "TransportClient",
    "SyncTransport",
]
