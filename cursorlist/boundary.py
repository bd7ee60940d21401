""" Query Boundary: validate a page request, pick a snapshot, resolve """

from __future__ import annotations

import logging
from typing import Optional, Any

from cursorlist.page import Page
from cursorlist.resolver import resolve_page
from cursorlist.settings import PagerSettings
from cursorlist.source import SnapshotSelector, fresh_seeded_snapshot
from cursorlist.typing import Identifier

logger = logging.getLogger(__name__)


class QueryBoundary:
    """ Query Boundary: serves pages to the transport layer

    Example:
        boundary = QueryBoundary(fixed_snapshot(source))
        page = boundary.query(first=20)
        page = boundary.query(first=20, cursor=page.page_info.end_cursor)
    """
    # Snapshot selection policy: called once per request
    select_snapshot: SnapshotSelector

    # Settings
    settings: PagerSettings

    def __init__(self, select_snapshot: SnapshotSelector, settings: PagerSettings = None):
        self.select_snapshot = select_snapshot
        self.settings = settings or PagerSettings()

    @classmethod
    def reference(cls, settings: PagerSettings = None):
        """ The reference scenario: a freshly seeded snapshot for every request """
        settings = settings or PagerSettings()
        return cls(
            fresh_seeded_snapshot(settings.dataset_size, settings.dataset_seed),
            settings,
        )

    def query(self, first: Any, cursor: Optional[Identifier] = None) -> Page:
        """ Get a page of `first` records that follow `cursor`

        Raises:
            exc.InvalidArgumentError: `first` is missing, or is not a positive integer
        """
        # Validate before anything else: an invalid request touches nothing
        page_size = self.settings.get_final_page_size(first)

        # Resolve against the snapshot
        source = self.select_snapshot()
        page = resolve_page(source, cursor, page_size)

        logger.debug(f'Page: first={page_size} cursor={cursor!r} => {len(page.edges)} edges, '
                     f'has_next_page={page.page_info.has_next_page}')
        return page
