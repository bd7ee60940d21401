""" Pages: Relay-style connections """

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict, Optional

from cursorlist import exc
from cursorlist.typing import Identifier, RecordDict


@dataclass(frozen=True)
class Edge:
    """ Paginated item: a record and its resumption point """
    # Cursor: resume pagination after this record
    cursor: Identifier

    # The record itself
    node: RecordDict


@dataclass(frozen=True)
class PageInfo:
    """ Page metadata """
    # Cursor to resume from.
    # The id of the last edge; for an empty page, the cursor that was given (if any)
    end_cursor: Optional[Identifier]

    # Is there at least one more record after this page?
    has_next_page: bool


@dataclass(frozen=True)
class Page:
    """ A page of records: edges + page info """
    edges: tuple[Edge, ...]
    page_info: PageInfo

    def nodes(self) -> list[RecordDict]:
        """ Get the records, in edge order """
        return [edge.node for edge in self.edges]

    def connection_dict(self) -> ConnectionDict:
        """ Export as a Relay connection dict """
        return {
            'edges': [
                {'cursor': edge.cursor, 'node': edge.node}
                for edge in self.edges
            ],
            'pageInfo': {
                'endCursor': self.page_info.end_cursor,
                'hasNextPage': self.page_info.has_next_page,
            },
        }

    @classmethod
    def from_connection_dict(cls, connection: ConnectionDict) -> Page:
        """ Parse a Relay connection dict

        Raises:
            exc.InvalidArgumentError: malformed connection
        """
        try:
            edges = tuple(
                Edge(cursor=edge['cursor'], node=edge['node'])
                for edge in connection['edges']
            )
            page_info = PageInfo(
                end_cursor=connection['pageInfo']['endCursor'],
                has_next_page=connection['pageInfo']['hasNextPage'],
            )
        except (KeyError, TypeError) as e:
            raise exc.InvalidArgumentError('connection', f'malformed page: {e!r}') from e

        # Check types
        if not isinstance(page_info.has_next_page, bool):
            raise exc.InvalidArgumentError('connection', '"hasNextPage" must be a boolean')

        return cls(edges=edges, page_info=page_info)


class ConnectionDict(TypedDict):
    """ Relay Connection type: paginated list """
    edges: list[EdgeDict]
    pageInfo: PageInfoDict


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    cursor: Identifier
    node: RecordDict


class PageInfoDict(TypedDict):
    """ Relay Page Info """
    endCursor: Optional[Identifier]
    hasNextPage: bool
