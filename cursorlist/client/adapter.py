""" Virtualized List Adapter: the bridge between the controller and a windowed renderer

The renderer only ever asks by index: "is row N loaded?", "render row N", "how many rows?".
When it scrolls, it reports the visible window, and the adapter decides whether to load more.
"""

from __future__ import annotations

import asyncio
import logging
from collections import abc
from typing import Optional

from cursorlist.typing import RecordDict
from .controller import IncrementalFetchController

logger = logging.getLogger(__name__)


# Loading indicator for rows that are not loaded yet
LOADING_PLACEHOLDER = 'Loading...'


def full_name(person: RecordDict) -> str:
    """ Render a person: "firstname lastname" """
    return f'{person["firstname"]} {person["lastname"]}'


class VirtualizedListAdapter:
    """ Answers the renderer's questions by index

    While there's more data, one extra row is reserved at the end: the sentinel.
    It's never loaded, so once it becomes visible, the next page gets requested.

    Example:
        adapter = VirtualizedListAdapter(controller)
        adapter.visible_range_changed(0, 10)  # loads the first page
        ...
        adapter.render_window(0, 10)
    """

    def __init__(self, controller: IncrementalFetchController, *,
                 render_item: abc.Callable[[RecordDict], str] = full_name,
                 placeholder: str = LOADING_PLACEHOLDER):
        """
        Args:
            controller: The controller that holds the records
            render_item: Function to render a loaded record
            placeholder: Content for rows that are still loading
        """
        self.controller = controller
        self.render_item = render_item
        self.placeholder = placeholder

    def is_loaded(self, index: int) -> bool:
        """ Is row `index` loaded?

        When there's no next page, every row counts as loaded: nothing is pending anymore.
        """
        return index < len(self.controller.accumulated) or not self.controller.has_next_page

    def item_count(self) -> int:
        """ The number of rows: records + the sentinel, if there's more data """
        return len(self.controller.accumulated) + (1 if self.controller.has_next_page else 0)

    def render(self, index: int) -> str:
        """ Render row `index`: a record, or a loading placeholder """
        if not self.is_loaded(index):
            return self.placeholder

        # Beyond the end of an exhausted list: nothing to show
        if index >= len(self.controller.accumulated):
            return ''

        return self.render_item(self.controller.accumulated[index])

    def render_window(self, start: int, stop: int) -> list[str]:
        """ Render rows [start, stop), clamped to the row count """
        return [self.render(index) for index in range(start, min(stop, self.item_count()))]

    def request_load_more(self) -> Optional[asyncio.Task]:
        """ Ask the controller for the next page. No-op while it's loading """
        if self.controller.is_loading:
            return None
        return self.controller.request_load_more()

    def visible_range_changed(self, start: int, stop: int) -> Optional[asyncio.Task]:
        """ Renderer callback: rows [start, stop) are now visible

        Loads more if any visible row is not loaded.
        """
        stop = min(stop, self.item_count())
        if any(not self.is_loaded(index) for index in range(start, stop)):
            logger.debug(f'Rows [{start}, {stop}) are visible; some are not loaded')
            return self.request_load_more()
        return None
