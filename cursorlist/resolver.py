""" Page Resolver: cut a page out of an ordered data source

The cursor is the id of the last record the client has seen.
Resolving a cursor always means "skip past the record with this id", never "skip N records":
positions may shift between snapshots, identities don't.
"""

from __future__ import annotations

import logging
from typing import Optional

from cursorlist import exc
from cursorlist.page import Page, Edge, PageInfo
from cursorlist.source import OrderedDataSource
from cursorlist.typing import Identifier

logger = logging.getLogger(__name__)


def resolve_page(source: OrderedDataSource, cursor: Optional[Identifier], page_size: int) -> Page:
    """ Get the page that follows `cursor`

    Pure function of (source, cursor, page_size): it's safe to call it concurrently
    as long as the source is not modified.

    An unknown cursor is not an error: pagination restarts from the beginning (fail-open),
    and the result is exactly the same as with `cursor=None`.

    Example:
        page = resolve_page(source, None, 20)
        page = resolve_page(source, page.page_info.end_cursor, 20)

    Raises:
        exc.InvalidArgumentError: page_size < 1
    """
    if page_size < 1:
        raise exc.InvalidArgumentError('first', f'must be >= 1, got {page_size}')

    # Where to start?
    start = start_index(source, cursor)
    if start == 0:
        cursor = None  # unknown cursor = no cursor

    # Slice
    total = source.length()
    stop = min(start + page_size, total)
    edges = tuple(
        Edge(cursor=record[source.id_field], node=dict(record))
        for record in (source.record_at(i) for i in range(start, stop))
    )

    # Page info
    # On an empty page, the previous cursor is propagated
    end_cursor = edges[-1].cursor if edges else cursor
    has_next_page = start + page_size < total

    # Done
    return Page(
        edges=edges,
        page_info=PageInfo(end_cursor=end_cursor, has_next_page=has_next_page),
    )


def start_index(source: OrderedDataSource, cursor: Optional[Identifier]) -> int:
    """ Get the position that follows the `cursor` record

    Returns 0 when there's no cursor, or when the cursor is not found.
    """
    if cursor is None:
        return 0

    index = source.index_of_id(cursor)
    if index is None:
        # This may mean that the data source was regenerated since the cursor was issued
        logger.warning(f'Unknown cursor {cursor!r}: falling back to the start of the list')
        return 0

    return index + 1

