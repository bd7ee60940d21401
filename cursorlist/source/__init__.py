""" Ordered data sources

An ordered data source is an immutable sequence of records, each with a unique id.
Pagination cursors point into it by id, never by position.
"""

from .base import OrderedDataSource
from .memory import ListDataSource
from .generate import generate_persons, seeded_source
from .snapshot import SnapshotSelector, fresh_seeded_snapshot, fixed_snapshot, table_snapshot
from .table import persons_table, load_table_snapshot
