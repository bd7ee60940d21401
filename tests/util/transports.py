""" Transports for unit-tests """

from __future__ import annotations

import asyncio
from collections import abc
from typing import Optional

from cursorlist import exc
from cursorlist.client import Transport
from cursorlist.page import Page, Edge, PageInfo


class RecordingTransport(Transport):
    """ Wraps a transport: records requests, can hold them, can fail them

    Example:
        transport = RecordingTransport(BoundaryTransport(boundary))
        transport.hold()      # requests will wait until release()
        transport.fail_next = 1   # the next request fails
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self.requests: list[tuple[int, Optional[str]]] = []
        self.fail_next = 0
        self._gate: Optional[asyncio.Event] = None

    def hold(self):
        self._gate = asyncio.Event()

    def release(self):
        if self._gate is not None:
            self._gate.set()
        self._gate = None

    async def fetch_page(self, first: int, cursor: Optional[str]) -> Page:
        self.requests.append((first, cursor))

        # Hold
        if self._gate is not None:
            await self._gate.wait()

        # Fail
        if self.fail_next:
            self.fail_next -= 1
            raise exc.TransportError('Connection reset by peer')

        return await self.transport.fetch_page(first, cursor)


class StaticTransport(Transport):
    """ Returns the pages it was given, one by one """

    def __init__(self, pages: abc.Iterable[Page]):
        self.pages = list(pages)
        self.requests: list[tuple[int, Optional[str]]] = []

    async def fetch_page(self, first: int, cursor: Optional[str]) -> Page:
        self.requests.append((first, cursor))
        return self.pages.pop(0)


class BrokenTransport(Transport):
    """ Fails with an exception that is not a TransportError """

    async def fetch_page(self, first: int, cursor: Optional[str]) -> Page:
        raise RuntimeError('Oops')


def make_page(ids: abc.Iterable[str], has_next_page: bool, end_cursor: str = None) -> Page:
    """ Make a page of persons with these ids """
    edges = tuple(
        Edge(cursor=id, node={'id': id, 'firstname': 'First', 'lastname': id})
        for id in ids
    )
    return Page(
        edges=edges,
        page_info=PageInfo(
            end_cursor=edges[-1].cursor if edges else end_cursor,
            has_next_page=has_next_page,
        ),
    )
