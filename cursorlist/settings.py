from __future__ import annotations

import dataclasses
from typing import Optional, Any

from cursorlist import exc


# The page size the client asks for, if not specified
DEFAULT_PAGE_SIZE = 20


@dataclasses.dataclass
class PagerSettings:
    """ Settings for the Query Boundary

    This object defines additional behavior for page queries:
    cap the page size, describe the reference data set.
    """
    # The max number of items per page, regardless of `first`
    max_page_size: Optional[int] = None

    # Reference data set: the number of records
    dataset_size: int = 50

    # Reference data set: the seed for the deterministic generator
    dataset_seed: int = 123

    def __post_init__(self):
        assert self.max_page_size is None or self.max_page_size >= 1, 'max_page_size must be positive'
        assert self.dataset_size >= 0, 'dataset_size cannot be negative'

    # ### Callbacks for QueryBoundary

    def get_final_page_size(self, first: Any) -> int:
        """ Callback that validates `first` and applies the max page size

        Used by: the Query Boundary to decide how many records to put on a page.

        Raises:
            exc.InvalidArgumentError: `first` is missing, not an integer, or not positive
        """
        # Validate
        if first is None:
            raise exc.InvalidArgumentError('first', 'is required')
        if not isinstance(first, int) or isinstance(first, bool):
            raise exc.InvalidArgumentError('first', 'must be an integer')
        if first < 1:
            raise exc.InvalidArgumentError('first', f'must be >= 1, got {first}')

        # Apply max page size
        if self.max_page_size:
            first = min(first, self.max_page_size)

        # Done
        return first
