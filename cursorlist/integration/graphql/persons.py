""" The `persons` query: cursor pagination over GraphQL """

from __future__ import annotations

from typing import Optional

import graphql

from cursorlist.boundary import QueryBoundary
from cursorlist.page import ConnectionDict
from .schema import graphql_persons_schema, resolves


# The query that the client sends.
# Feed the `endCursor` of the previous page into `$cursor` to get the next one.
# language=graphql
PERSONS_QUERY = '''
query getPersons($first: Int!, $cursor: ID) {
    persons(first: $first, cursor: $cursor) {
        edges {
            cursor
            node { id firstname lastname }
        }
        pageInfo {
            endCursor
            hasNextPage
        }
    }
}
'''


def build_persons_schema(boundary: QueryBoundary) -> graphql.GraphQLSchema:
    """ Build the GraphQL schema and bind the `persons` resolver to the Query Boundary

    Invalid arguments (e.g. `first: 0`) are reported as GraphQL errors.

    Example:
        schema = build_persons_schema(QueryBoundary.reference())
        res = graphql.graphql_sync(schema, PERSONS_QUERY, variable_values={'first': 20})
    """
    schema = graphql.build_schema(graphql_persons_schema)

    @resolves(schema, 'Query', 'persons')
    def resolve_persons(root, info: graphql.GraphQLResolveInfo, first: int, cursor: Optional[str] = None) -> ConnectionDict:
        return boundary.query(first=first, cursor=cursor).connection_dict()

    return schema
