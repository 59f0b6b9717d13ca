"""REST client for reading and driving a Home Assistant hub.

`HubClient` wraps one `aiohttp.ClientSession` with the hub's base URL, a bearer token and a fixed
request timeout. Every operation is exactly one HTTP round trip; there is no caching and no retry.
Failures are raised as `HttpStatusError` (non-2xx) or `TransportError` (network, timeout, decoding).
"""

import json
import typing
from logging import getLogger
from types import MappingProxyType
from typing import Any, Self

import aiohttp
from pydantic import ValidationError
from yarl import URL

from hatemp.const import REQUEST_TIMEOUT_SECONDS
from hatemp.exceptions import HttpStatusError, TransportError
from hatemp.models import ENTITY_STATE_LIST_ADAPTER, EntityState
from hatemp.utils.url_utils import build_auth_headers, build_rest_url

if typing.TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

LOGGER = getLogger(__name__)


class HubClient:
    """Authenticated access to the Home Assistant REST API.

    The connection settings are fixed at construction. The underlying session is opened on first use
    and released by `close()`, or automatically when used as an async context manager::

        async with HubClient("http://hass.local:8123", token) as client:
            state = await client.get_state("sensor.outdoor")
    """

    __slots__ = ("_headers", "_rest_url", "_session", "_timeout")

    def __init__(self, base_url: str, token: str, *, timeout: float = REQUEST_TIMEOUT_SECONDS):
        """Create a client.

        Args:
            base_url: Base URL of the Home Assistant instance, e.g. "http://127.0.0.1:8123".
            token: Long-lived access token.
            timeout: Total timeout in seconds for each request.

        Raises:
            ClientConstructionError: If the base URL or the token is unusable.
        """
        self._rest_url = build_rest_url(base_url)
        self._headers = MappingProxyType(build_auth_headers(token))
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> URL:
        """The REST API root, e.g. http://127.0.0.1:8123/api."""
        return self._rest_url

    @property
    def headers(self) -> "Mapping[str, str]":
        """Headers sent with every request."""
        return self._headers

    @property
    def timeout(self) -> float | None:
        """Total timeout in seconds applied to each request."""
        return self._timeout.total

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def __aenter__(self) -> Self:
        self._get_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: "TracebackType | None",
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying session, if one was opened."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=dict(self._headers), timeout=self._timeout)
        return self._session

    async def _request(self, method: str, url: URL, payload: dict[str, Any] | None = None) -> Any:
        """Send one request and return the decoded JSON body. POST bodies are read and discarded.

        Raises:
            HttpStatusError: If the hub responds with a non-2xx status.
            TransportError: On connection failure, timeout, or an undecodable body.
        """
        session = self._get_session()
        LOGGER.debug("%s %s", method, url)

        try:
            async with session.request(method, url, json=payload) as response:
                if not 200 <= response.status < 300:
                    body = await response.text(errors="replace")
                    LOGGER.debug("%s %s failed with status %s", method, url, response.status)
                    raise HttpStatusError.from_response(method, str(url), response.status, body)

                if method == "POST":
                    await response.read()
                    return None

                try:
                    return await response.json(content_type=None)
                except (json.JSONDecodeError, UnicodeDecodeError) as err:
                    raise TransportError(f"{method} {url} returned a body that is not JSON: {err}") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"{method} {url} failed: {type(err).__name__}: {err}") from err
        except TimeoutError as err:
            raise TransportError(f"{method} {url} timed out after {self.timeout} seconds") from err

    async def get_state(self, entity_id: str) -> EntityState:
        """Get the current state of one entity.

        Args:
            entity_id: The entity to fetch, e.g. "sensor.outdoor".

        Returns:
            The entity's state.
        """
        url = self._rest_url / "states" / entity_id
        data = await self._request("GET", url)

        try:
            return EntityState.model_validate(data)
        except ValidationError as err:
            raise TransportError(f"Invalid state payload for {entity_id}: {err}", entity_id=entity_id) from err

    async def get_states(self) -> list[EntityState]:
        """Get the states of all entities known to the hub."""
        url = self._rest_url / "states"
        data = await self._request("GET", url)

        try:
            return ENTITY_STATE_LIST_ADAPTER.validate_python(data)
        except ValidationError as err:
            raise TransportError(f"Invalid states payload: {err}") from err

    async def call_service(self, domain: str, service: str, payload: dict[str, Any] | None = None) -> None:
        """Call a Home Assistant service.

        Args:
            domain: Service domain, e.g. "light".
            service: Service name, e.g. "turn_on".
            payload: JSON body to send. Defaults to an empty object.
        """
        url = self._rest_url / "services" / domain / service
        await self._request("POST", url, payload if payload is not None else {})
