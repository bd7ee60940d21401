""" Snapshots of database tables """

from __future__ import annotations

import logging
from collections import abc
from typing import Optional

import sqlalchemy as sa

from .memory import ListDataSource

logger = logging.getLogger(__name__)


metadata = sa.MetaData()

# The "persons" table.
# `seq` defines the insertion order; `id` is the public identifier
persons_table = sa.Table(
    'persons', metadata,
    sa.Column('seq', sa.Integer, primary_key=True, autoincrement=True),
    sa.Column('id', sa.String(36), nullable=False, unique=True),
    sa.Column('firstname', sa.String, nullable=False),
    sa.Column('lastname', sa.String, nullable=False),
)

# Columns that a person record is made of
PERSON_COLUMNS = (persons_table.c.id, persons_table.c.firstname, persons_table.c.lastname)


def load_table_snapshot(connection: sa.engine.Connection,
                        columns: abc.Sequence[sa.sql.ColumnElement] = PERSON_COLUMNS,
                        order_by: Optional[abc.Sequence[sa.sql.ColumnElement]] = None,
                        id_field: str = 'id',
                        ) -> ListDataSource:
    """ Load rows from the database into an immutable in-memory snapshot

    The order must be total and stable: otherwise, cursors would not survive between snapshots.
    By default, the persons table is ordered by insertion (`seq`).

    Args:
        connection: The connection to load the rows with
        columns: The columns to select. Every record will have exactly these keys
        order_by: The columns to order by. Default: insertion order of the persons table
        id_field: Name of the unique id column
    """
    if order_by is None:
        order_by = (persons_table.c.seq,)

    stmt = sa.select(*columns).order_by(*order_by)
    rows = [dict(row) for row in connection.execute(stmt).mappings()]

    logger.info(f'Loaded a snapshot of {len(rows)} rows')
    return ListDataSource(rows, id_field=id_field)
