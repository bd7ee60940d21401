""" HTTP transport: GraphQL over HTTP with httpx """

from __future__ import annotations

import logging
from typing import Optional

import httpx

from cursorlist import exc
from cursorlist.integration.graphql import PERSONS_QUERY
from cursorlist.page import Page
from cursorlist.typing import Identifier
from .transport import Transport, page_from_graphql_result

logger = logging.getLogger(__name__)


class HttpGraphQLTransport(Transport):
    """ Send the `persons` query to a GraphQL endpoint

    The transport relies on httpx for timeouts: a timeout is reported as a failure.

    Example:
        async with HttpGraphQLTransport('http://localhost:8000/graphql') as transport:
            page = await transport.fetch_page(20, None)
    """

    def __init__(self, url: str, *, client: httpx.AsyncClient = None, timeout: float = 30.0, query: str = PERSONS_QUERY):
        """
        Args:
            url: GraphQL endpoint URL
            client: The client to use. Default: a new client that this transport owns and closes
            timeout: Timeout for the default client, seconds
            query: The GraphQL query to send
        """
        self.url = url
        self.query = query
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_page(self, first: int, cursor: Optional[Identifier]) -> Page:
        body = {
            'query': self.query,
            'variables': {'first': first, 'cursor': cursor},
        }

        # Request
        try:
            response = await self.client.post(self.url, json=body)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.warning(f'Request to {self.url} failed: {e!r}')
            raise exc.TransportError(f'HTTP request failed: {e}') from e
        except ValueError as e:
            raise exc.TransportError(f'Response is not JSON: {e}') from e

        # Parse
        if not isinstance(payload, dict):
            raise exc.TransportError('Response is not a JSON object')
        return page_from_graphql_result(payload.get('data'), payload.get('errors'))

    async def close(self):
        """ Close the client, if we own it """
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
        return False
