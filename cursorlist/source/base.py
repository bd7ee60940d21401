from __future__ import annotations

from typing import Optional

from cursorlist.typing import Identifier, RecordDict


class OrderedDataSource:
    """ Base for ordered data sources. Defines the interface

    An ordered data source is an immutable sequence of records with unique identifiers.
    The order is fixed: every call sees the same records at the same positions.
    """
    # Name of the field that contains the unique id
    id_field: str = 'id'

    def length(self) -> int:
        """ Get the number of records """
        raise NotImplementedError

    def record_at(self, index: int) -> RecordDict:
        """ Get the record at position `index`

        Raises:
            IndexError: the index is out of range
        """
        raise NotImplementedError

    def index_of_id(self, id: Identifier) -> Optional[int]:
        """ Find the position of the record with this id. None if not found """
        raise NotImplementedError

    def __len__(self):
        return self.length()
