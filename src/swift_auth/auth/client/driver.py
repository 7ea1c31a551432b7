"""HTTP request driver for identity services.

This module executes the requests built by authenticators. It owns the
HTTP client, enforces the 2xx status contract, guarantees that response
bodies are drained and closed, and flushes idle keep-alive connections
after every round trip so a failed handshake does not pin a socket the
server may already have abandoned.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

import httpx
from pydantic import BaseModel, ValidationError

from swift_auth.auth.exceptions import (
    AuthTimeoutError,
    DecodeError,
    HttpStatusError,
    TransportError,
)
from swift_auth.observability.logging import get_logger


if TYPE_CHECKING:
    from types import TracebackType

    from swift_auth.auth.providers.models import Credentials
    from swift_auth.auth.providers.protocol import Authenticator


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class IdleConnectionFlusher(Protocol):
    """Transport capability for dropping idle keep-alive connections."""

    async def aclose_idle_connections(self) -> None:
        """Close every pooled connection that has no request in flight."""
        ...


class KeepaliveFlushingTransport(httpx.AsyncHTTPTransport):
    """httpx transport that can close its idle pooled connections.

    Closed connections are evicted by the pool the next time it assigns
    a request.
    """

    async def aclose_idle_connections(self) -> None:
        for connection in list(self._pool.connections):
            if connection.is_idle():
                await connection.aclose()


async def flush_keepalive_connections(transport: object) -> None:
    """Flush idle connections if the transport supports it."""
    if isinstance(transport, IdleConnectionFlusher):
        await transport.aclose_idle_connections()


async def drain_and_close(response: httpx.Response) -> None:
    """Discard any unread body data and close the response.

    Read errors are ignored; the stream is closed either way.
    """
    try:
        await response.aread()
    except httpx.HTTPError as e:
        logger.debug("Discarding error while draining response", error=str(e))
    finally:
        await response.aclose()


async def read_json(response: httpx.Response, model: type[T]) -> T:
    """Decode a JSON response body into ``model``.

    The response is closed on every exit path.

    Raises:
        DecodeError: If the body is not valid JSON for ``model``.
        TransportError: If the body cannot be read.
    """
    try:
        body = await response.aread()
    except httpx.TimeoutException as e:
        msg = f"Timed out reading auth response: {e}"
        raise AuthTimeoutError(msg) from e
    except httpx.HTTPError as e:
        msg = f"Failed to read auth response: {e}"
        raise TransportError(msg) from e
    finally:
        await response.aclose()

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning(
            "Failed to decode auth response",
            model=model.__name__,
            errors=e.error_count(),
        )
        msg = f"Invalid {model.__name__} document: {e}"
        raise DecodeError(msg) from e


def check_status(response: httpx.Response) -> bool:
    """Return True if the status code is in the 2xx range."""
    return 200 <= response.status_code <= 299


class RequestDriver:
    """Executes authentication requests over a shared httpx client.

    The driver is the injected transport collaborator of the authenticators.
    It performs exactly one round trip per call and never retries; retry
    orchestration belongs to the caller.

    Attributes:
        transport: The httpx transport, by default one that can flush its
            idle keep-alive connections.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the driver.

        Args:
            transport: Optional transport. Flushing only happens when it
                provides ``aclose_idle_connections()``.
        """
        self.transport = transport or KeepaliveFlushingTransport()
        self._http_client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Create the HTTP client."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(transport=self.transport)
        logger.debug("RequestDriver initialized")

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("RequestDriver shutdown")

    async def __aenter__(self) -> RequestDriver:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.shutdown()

    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` and enforce the 2xx status contract.

        A successful response is returned with its body unread; the
        authenticator's ``response()`` is responsible for closing it.

        Raises:
            AuthTimeoutError: If the request deadline expires.
            TransportError: On connection, DNS or TLS failures.
            HttpStatusError: If the status is outside 200-299.
        """
        if self._http_client is None:
            await self.initialize()

        assert self._http_client is not None

        try:
            response = await self._http_client.send(request, stream=True)

            if not check_status(response):
                await drain_and_close(response)
                logger.warning(
                    "Auth request rejected",
                    method=request.method,
                    url=str(request.url),
                    status_code=response.status_code,
                )
                raise HttpStatusError(response.status_code, response.reason_phrase)

        except httpx.TimeoutException as e:
            logger.warning("Auth request timeout", url=str(request.url))
            msg = f"Auth request timed out: {e}"
            raise AuthTimeoutError(msg) from e

        except httpx.RequestError as e:
            logger.warning(
                "Auth request connection error",
                url=str(request.url),
                error=str(e),
            )
            msg = f"Cannot connect to identity service: {e}"
            raise TransportError(msg) from e

        finally:
            await flush_keepalive_connections(self.transport)

        return response


async def authenticate(
    authenticator: Authenticator,
    credentials: Credentials,
    driver: RequestDriver,
) -> None:
    """Run one complete authentication attempt.

    Builds the request, executes it and feeds the response back into the
    authenticator. The whole round trip, body read included, is bounded by
    one deadline: ``credentials.timeout`` if set, else the authenticator's
    timeout. Exceeding it cancels the in-flight call and closes the response.

    Errors propagate unchanged so a retry driver can decide whether another
    attempt is worthwhile.

    Raises:
        AuthTimeoutError: If the deadline expires.
    """
    request = authenticator.request(credentials)
    deadline = credentials.deadline(authenticator.timeout)
    logger.debug(
        "Authenticating",
        version=authenticator.version,
        url=str(request.url),
        deadline=deadline,
    )

    response: httpx.Response | None = None
    try:
        async with asyncio.timeout(deadline):
            response = await driver.execute(request)
            await authenticator.response(response)
    except TimeoutError as e:
        if response is not None:
            await response.aclose()
        logger.warning("Auth attempt deadline exceeded", url=str(request.url))
        msg = f"Auth attempt exceeded its {deadline}s deadline"
        raise AuthTimeoutError(msg) from e

    logger.info(
        "Authenticated",
        version=authenticator.version,
        storage_url=authenticator.storage_url(),
    )
