from __future__ import annotations

from collections import abc
from typing import Optional

from cursorlist import exc
from cursorlist.typing import Identifier, RecordDict

from .base import OrderedDataSource


class ListDataSource(OrderedDataSource):
    """ Ordered data source: an in-memory snapshot

    Records are copied into a tuple on construction, and the id => index map is built once.

    Example:
        source = ListDataSource([
            {'id': 'a', 'firstname': 'Jean'},
            {'id': 'b', 'firstname': 'Anne'},
        ])
        source.index_of_id('b')  # -> 1
    """
    __slots__ = 'records', 'id_field', '_index'

    # The records, in their final order
    records: tuple[RecordDict, ...]

    # Name of the field that contains the unique id
    id_field: str

    # Map: record id => position
    _index: dict[Identifier, int]

    def __init__(self, records: abc.Iterable[RecordDict], id_field: str = 'id'):
        """ Make a snapshot of records

        Raises:
            exc.InvalidArgumentError: a record has no id, or two records share one
        """
        self.records = tuple(records)
        self.id_field = id_field
        self._index = {}

        for i, record in enumerate(self.records):
            try:
                id = record[id_field]
            except KeyError as e:
                raise exc.InvalidArgumentError('records', f'record #{i} has no "{id_field}" field') from e

            if id in self._index:
                raise exc.InvalidArgumentError('records', f'duplicate id {id!r} at #{self._index[id]} and #{i}')
            self._index[id] = i

    def length(self) -> int:
        return len(self.records)

    def record_at(self, index: int) -> RecordDict:
        """ Get the record at position `index`. The dict is shared with the snapshot: do not modify it """
        if index < 0:
            raise IndexError(index)
        return self.records[index]

    def index_of_id(self, id: Identifier) -> Optional[int]:
        return self._index.get(id)

    def __repr__(self):
        return f'{type(self).__name__}(<{len(self.records)} records>)'
