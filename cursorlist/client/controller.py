""" Incremental Fetch Controller: load pages one by one, accumulate records

The controller is driven by a single asyncio event loop.
At most one request is in flight at any time, so responses are merged in the order they were requested,
and the accumulated list only ever grows at the end: once position N is loaded, it never changes.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from collections import abc
from typing import Optional

from cursorlist import exc
from cursorlist.page import Page
from cursorlist.settings import DEFAULT_PAGE_SIZE
from cursorlist.typing import Identifier, RecordDict
from .transport import Transport

logger = logging.getLogger(__name__)


class FetchState(enum.Enum):
    """ Controller state """
    # Ready to load more
    IDLE = 'idle'

    # A request is in flight
    LOADING = 'loading'

    # The last request has failed. Call retry()
    ERROR = 'error'

    # No more data. Terminal
    EXHAUSTED = 'exhausted'


class AccumulatedList:
    """ Records received so far, plus the pagination state to continue from

    Append-only: records are never removed or reordered.
    """
    __slots__ = '_nodes', 'end_cursor', 'has_next_page'

    # Cursor to continue from: `endCursor` of the last non-empty page
    end_cursor: Optional[Identifier]

    # Is there more data to load?
    has_next_page: bool

    def __init__(self):
        self._nodes: list[RecordDict] = []
        self.end_cursor = None
        self.has_next_page = True

    def merge(self, page: Page) -> int:
        """ Append a page. Returns the number of records appended

        An empty page changes nothing but `has_next_page`: the cursor is retained.
        """
        if page.edges:
            self._nodes.extend(page.nodes())
            self.end_cursor = page.page_info.end_cursor
        self.has_next_page = page.page_info.has_next_page
        return len(page.edges)

    @property
    def nodes(self) -> tuple[RecordDict, ...]:
        """ Get the records received so far

        The tuple is a snapshot: later merges don't change it. The records themselves are shared, not copied.
        """
        return tuple(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def __getitem__(self, index: int) -> RecordDict:
        return self._nodes[index]

    def __repr__(self):
        return f'{type(self).__name__}(<{len(self._nodes)} records>, end_cursor={self.end_cursor!r}, has_next_page={self.has_next_page})'


# Listener: called after every state change
ChangeListener = abc.Callable[['IncrementalFetchController'], None]


class IncrementalFetchController:
    """ Client-side state machine that loads pages on demand

    States:
        IDLE --request_load_more()--> LOADING
        LOADING --success--> IDLE, or EXHAUSTED when there's no next page
        LOADING --failure--> ERROR (data is kept)
        ERROR --retry()--> LOADING (same cursor)

    Example:
        controller = IncrementalFetchController(GraphQLTransport(schema))

        @controller.on_change.append
        def rerender(controller):
            ...

        await controller.load_more()
    """

    # Where pages come from
    transport: Transport

    # How many records to request at once
    page_size: int

    # Current state
    state: FetchState

    # Records received so far
    accumulated: AccumulatedList

    # The error of the last failed request. Reset when a new request is issued
    error: Optional[exc.TransportError]

    # Listeners: called after every state change
    on_change: list[ChangeListener]

    def __init__(self, transport: Transport, page_size: int = DEFAULT_PAGE_SIZE):
        assert page_size >= 1, 'page_size must be positive'
        self.transport = transport
        self.page_size = page_size
        self.state = FetchState.IDLE
        self.accumulated = AccumulatedList()
        self.error = None
        self.on_change = []

        # The request in flight
        self._inflight: Optional[asyncio.Task] = None

        # Set when the owner is gone: no more requests, no more updates
        self._closed = False

    @property
    def is_loading(self) -> bool:
        return self.state is FetchState.LOADING

    @property
    def has_error(self) -> bool:
        """ Loading error flag: the last request has failed. Previously loaded data is still available """
        return self.state is FetchState.ERROR

    @property
    def has_next_page(self) -> bool:
        return self.accumulated.has_next_page

    def request_load_more(self) -> Optional[asyncio.Task]:
        """ Start loading the next page, if possible

        It's a no-op when:
        * a request is already in flight (the requests are coalesced),
        * there's no next page,
        * the last request has failed (use retry()),
        * the controller is closed.

        Must be called from within a running event loop.

        Returns:
            The task that loads the page, or None if no request was issued
        """
        if self.state is not FetchState.IDLE or not self.accumulated.has_next_page or self._closed:
            logger.debug(f'Load more: ignored in state {self.state.name}')
            return None

        return self._issue_request()

    def retry(self) -> Optional[asyncio.Task]:
        """ Repeat the failed request with the same cursor

        It's a no-op unless the controller is in the ERROR state.
        """
        if self.state is not FetchState.ERROR or self._closed:
            logger.debug(f'Retry: ignored in state {self.state.name}')
            return None

        return self._issue_request()

    async def load_more(self) -> None:
        """ Load the next page and wait until the request settles

        If a request is already in flight, wait for that one instead.
        """
        task = self.request_load_more() or self._inflight
        if task is not None:
            # Shield: if our caller is cancelled, the request should go on
            await asyncio.shield(task)

    def close(self):
        """ The owner is gone: cancel the request in flight, ignore whatever comes next """
        self._closed = True
        if self._inflight is not None:
            self._inflight.cancel()
            self._inflight = None

    def _issue_request(self) -> asyncio.Task:
        """ Go LOADING and send the request """
        self.error = None

        # The task exists before listeners hear about LOADING: a failing listener cannot leave us without one
        task = asyncio.ensure_future(self._fetch(self.accumulated.end_cursor))
        task.add_done_callback(self._on_task_done)
        self._inflight = task
        self._transition(FetchState.LOADING)
        return task

    async def _fetch(self, cursor: Optional[Identifier]):
        """ Fetch a page, and merge it """
        try:
            page = await self.transport.fetch_page(first=self.page_size, cursor=cursor)
        except asyncio.CancelledError:
            logger.debug(f'Request cancelled: cursor={cursor!r}')
            raise
        except exc.TransportError as e:
            self._on_failure(e)
        except Exception as e:
            # A transport that does not wrap its errors: still a failed request
            logger.exception('Unexpected transport failure')
            failure = exc.TransportError(f'Unexpected failure: {e!r}')
            failure.__cause__ = e
            self._on_failure(failure)
        else:
            self._on_success(page)
        finally:
            if self._inflight is asyncio.current_task():
                self._inflight = None

    def _on_task_done(self, task: asyncio.Task):
        """ Cancelled from the outside (e.g. a deadline), possibly before it even started: a failed request, retryable """
        if not task.cancelled() or self._closed or self.state is not FetchState.LOADING:
            return
        if self._inflight not in (None, task):
            return

        self._inflight = None
        self._on_failure(exc.TransportError('Request cancelled'))

    def _on_success(self, page: Page):
        # Closed? The result goes nowhere
        if self._closed:
            return

        # Merge
        appended = self.accumulated.merge(page)
        if not appended:
            logger.warning(f'Empty page received: cursor={self.accumulated.end_cursor!r}, '
                           f'has_next_page={page.page_info.has_next_page}')

        # Next state
        if self.accumulated.has_next_page:
            self._transition(FetchState.IDLE)
        else:
            self._transition(FetchState.EXHAUSTED)

    def _on_failure(self, e: exc.TransportError):
        if self._closed:
            return

        logger.warning(f'Failed to load a page: {e}')
        self.error = e
        self._transition(FetchState.ERROR)

    def _transition(self, state: FetchState):
        logger.debug(f'{self.state.name} -> {state.name} ({len(self.accumulated)} records)')
        self.state = state

        for listener in self.on_change:
            listener(self)
