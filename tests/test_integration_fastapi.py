import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cursorlist import QueryBoundary
from cursorlist.integration.fastapi import create_app
from cursorlist.integration.graphql import PERSONS_QUERY
from cursorlist.source import ListDataSource, fixed_snapshot


def test_persons_endpoint(client: TestClient, persons: ListDataSource):
    """ FastAPI: page through persons with GET /persons """
    ids = [person['id'] for person in persons.records]

    # First page
    res = client.get('/persons', params={'first': 20})
    assert res.status_code == 200
    connection = res.json()
    assert [edge['cursor'] for edge in connection['edges']] == ids[:20]
    assert connection['edges'][0]['node'] == persons.records[0]
    assert connection['pageInfo'] == {'endCursor': ids[19], 'hasNextPage': True}

    # Last page
    res = client.get('/persons', params={'first': 20, 'cursor': ids[39]})
    connection = res.json()
    assert [edge['cursor'] for edge in connection['edges']] == ids[40:]
    assert connection['pageInfo'] == {'endCursor': ids[49], 'hasNextPage': False}

    # Unknown cursor: the first page
    res = client.get('/persons', params={'first': 1, 'cursor': 'unknown'})
    assert res.json()['pageInfo'] == {'endCursor': ids[0], 'hasNextPage': True}


@pytest.mark.parametrize('uri_params', [
    '',
    '?first=0',
    '?first=-1',
])
def test_persons_endpoint_invalid_first(client: TestClient, uri_params: str):
    """ FastAPI: invalid `first` is a 400 """
    res = client.get(f'/persons{uri_params}')
    assert res.status_code == 400
    assert 'first' in res.json()['detail']


def test_graphql_endpoint(client: TestClient, persons: ListDataSource):
    """ FastAPI: POST /graphql """
    ids = [person['id'] for person in persons.records]

    res = client.post('/graphql', json={'query': PERSONS_QUERY, 'variables': {'first': 2, 'cursor': ids[0]}})
    assert res.status_code == 200
    body = res.json()
    assert 'errors' not in body
    assert [edge['cursor'] for edge in body['data']['persons']['edges']] == ids[1:3]
    assert body['data']['persons']['pageInfo'] == {'endCursor': ids[2], 'hasNextPage': True}

    # Error
    res = client.post('/graphql', json={'query': PERSONS_QUERY, 'variables': {'first': 0}})
    body = res.json()
    assert body['data'] == {'persons': None}
    assert 'must be >= 1' in body['errors'][0]['message']


def test_reference_app():
    """ FastAPI: the default app serves the reference data set """
    with TestClient(create_app()) as client:
        res = client.get('/persons', params={'first': 100})
        connection = res.json()
        assert len(connection['edges']) == 50
        assert connection['pageInfo']['hasNextPage'] == False


@pytest.fixture()
def app(persons: ListDataSource) -> FastAPI:
    return create_app(QueryBoundary(fixed_snapshot(persons)))


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as c:
        yield c
