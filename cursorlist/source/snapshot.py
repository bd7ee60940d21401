""" Snapshot selection policies

A snapshot selector is a function that picks the data source for a resolution.
The Query Boundary calls it once per request; the snapshot stays immutable for that request.
"""

from __future__ import annotations

from collections import abc

import sqlalchemy as sa

from .base import OrderedDataSource
from .generate import seeded_source
from .table import load_table_snapshot, PERSON_COLUMNS


# Snapshot selector: a callable that returns a data source for one resolution
SnapshotSelector = abc.Callable[[], OrderedDataSource]


def fresh_seeded_snapshot(count: int, seed: int) -> SnapshotSelector:
    """ Generate a fresh snapshot for every resolution

    Since the generator is seeded, every snapshot is the same: ids remain stable across requests.
    """
    def select_snapshot() -> OrderedDataSource:
        return seeded_source(count, seed=seed)
    return select_snapshot


def fixed_snapshot(source: OrderedDataSource) -> SnapshotSelector:
    """ Use the same snapshot for every resolution """
    def select_snapshot() -> OrderedDataSource:
        return source
    return select_snapshot


def table_snapshot(engine: sa.engine.Engine, columns: abc.Sequence[sa.sql.ColumnElement] = PERSON_COLUMNS, **kwargs) -> SnapshotSelector:
    """ Load a snapshot from the database for every resolution

    Args:
        engine: The engine to connect with
        columns, **kwargs: see `load_table_snapshot()`
    """
    def select_snapshot() -> OrderedDataSource:
        with engine.connect() as connection:
            return load_table_snapshot(connection, columns, **kwargs)
    return select_snapshot
