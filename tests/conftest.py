import os

import pytest
import sqlalchemy as sa

from cursorlist.source import ListDataSource, seeded_source
from cursorlist.source.table import metadata


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://')


@pytest.fixture(scope='function')
def engine() -> sa.engine.Engine:
    # In-memory SQLite: every connection must see the same database
    kwargs = dict(poolclass=sa.pool.StaticPool) if DATABASE_URL.startswith('sqlite') else dict()

    # Engine
    engine = sa.create_engine(DATABASE_URL, **kwargs)

    # Tables
    metadata.drop_all(engine)
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(scope='function')
def connection(engine: sa.engine.Engine) -> sa.engine.Connection:
    with engine.connect() as conn:
        yield conn


@pytest.fixture()
def persons() -> ListDataSource:
    """ The reference data set: 50 persons """
    return seeded_source(50, seed=123)
