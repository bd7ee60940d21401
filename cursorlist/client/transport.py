""" Transports: how the client gets pages from the Query Boundary

A transport sends {first, cursor} and returns a Page.
Any failure to deliver the request or to receive the response is raised as `exc.TransportError`.
"""

from __future__ import annotations

import logging
from typing import Optional

import graphql

from cursorlist import exc
from cursorlist.boundary import QueryBoundary
from cursorlist.integration.graphql import PERSONS_QUERY
from cursorlist.page import Page
from cursorlist.typing import Identifier

logger = logging.getLogger(__name__)


class Transport:
    """ Base for all transports. Defines the interface """

    async def fetch_page(self, first: int, cursor: Optional[Identifier]) -> Page:
        """ Get a page of `first` records that follow `cursor`

        Raises:
            exc.TransportError
        """
        raise NotImplementedError


class BoundaryTransport(Transport):
    """ In-process transport: call the Query Boundary directly """

    def __init__(self, boundary: QueryBoundary):
        self.boundary = boundary

    async def fetch_page(self, first: int, cursor: Optional[Identifier]) -> Page:
        try:
            return self.boundary.query(first=first, cursor=cursor)
        except exc.InvalidArgumentError as e:
            raise exc.TransportError(f'Request rejected: {e}') from e


class GraphQLTransport(Transport):
    """ In-process transport: execute the GraphQL query against a schema """

    def __init__(self, schema: graphql.GraphQLSchema, query: str = PERSONS_QUERY):
        self.schema = schema
        self.query = query

    async def fetch_page(self, first: int, cursor: Optional[Identifier]) -> Page:
        res = await graphql.graphql(self.schema, self.query, variable_values={'first': first, 'cursor': cursor})
        return page_from_graphql_result(res.data, res.errors)


def page_from_graphql_result(data: Optional[dict], errors: Optional[list]) -> Page:
    """ Get the Page from the `persons` GraphQL response

    Raises:
        exc.TransportError: the response has errors, or is malformed
    """
    # Errors? Report the first one
    if errors:
        raise exc.TransportError(f'GraphQL error: {errors[0]}')

    # No data?
    if not data or not data.get('persons'):
        raise exc.TransportError('GraphQL response has no "persons"')

    # Parse
    try:
        return Page.from_connection_dict(data['persons'])
    except exc.InvalidArgumentError as e:
        raise exc.TransportError(str(e)) from e
