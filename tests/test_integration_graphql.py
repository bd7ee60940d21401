import graphql
import pytest

from cursorlist import exc
from cursorlist import QueryBoundary
from cursorlist.integration.graphql import build_persons_schema, PERSONS_QUERY, resolves
from cursorlist.source import ListDataSource, fixed_snapshot
from cursorlist.testing import graphql_query_sync


def test_persons_query(persons: ListDataSource):
    """ Test: page through persons with GraphQL """
    schema = build_persons_schema(QueryBoundary(fixed_snapshot(persons)))
    ids = [person['id'] for person in persons.records]

    # First page
    res = graphql_query_sync(schema, PERSONS_QUERY, first=20)
    connection = res['persons']
    assert len(connection['edges']) == 20
    assert connection['edges'][0] == {'cursor': ids[0], 'node': persons.records[0]}
    assert connection['pageInfo'] == {'endCursor': ids[19], 'hasNextPage': True}

    # Next page
    res = graphql_query_sync(schema, PERSONS_QUERY, first=20, cursor=ids[19])
    assert res['persons']['pageInfo'] == {'endCursor': ids[39], 'hasNextPage': True}

    # Last page
    res = graphql_query_sync(schema, PERSONS_QUERY, first=20, cursor=ids[39])
    assert [edge['cursor'] for edge in res['persons']['edges']] == ids[40:]
    assert res['persons']['pageInfo'] == {'endCursor': ids[49], 'hasNextPage': False}


def test_persons_query_selection(persons: ListDataSource):
    """ Test: the client gets only what it asks for """
    schema = build_persons_schema(QueryBoundary(fixed_snapshot(persons)))

    # language=graphql
    query = '''
    query($cursor: ID) {
        persons(first: 2, cursor: $cursor) {
            edges { node { firstname lastname } }
            pageInfo { hasNextPage }
        }
    }
    '''
    res = graphql_query_sync(schema, query)
    assert res == {
        'persons': {
            'edges': [
                {'node': {'firstname': persons.records[0]['firstname'], 'lastname': persons.records[0]['lastname']}},
                {'node': {'firstname': persons.records[1]['firstname'], 'lastname': persons.records[1]['lastname']}},
            ],
            'pageInfo': {'hasNextPage': True},
        }
    }


def test_persons_query_empty():
    """ Test: empty source: no end cursor """
    schema = build_persons_schema(QueryBoundary(fixed_snapshot(ListDataSource([]))))

    res = graphql_query_sync(schema, PERSONS_QUERY, first=20)
    assert res == {'persons': {'edges': [], 'pageInfo': {'endCursor': None, 'hasNextPage': False}}}


@pytest.mark.parametrize('first', [0, -5])
def test_persons_query_invalid_first(persons: ListDataSource, first: int):
    """ Test: invalid `first` is a GraphQL error """
    schema = build_persons_schema(QueryBoundary(fixed_snapshot(persons)))

    with pytest.raises(graphql.GraphQLError) as e:
        graphql_query_sync(schema, PERSONS_QUERY, first=first)

    assert isinstance(e.value.original_error, exc.InvalidArgumentError)


def test_persons_query_missing_first(persons: ListDataSource):
    """ Test: `first` is required by the schema """
    schema = build_persons_schema(QueryBoundary(fixed_snapshot(persons)))

    res = graphql.graphql_sync(schema, PERSONS_QUERY, variable_values={})
    assert res.data is None
    assert res.errors and '$first' in res.errors[0].message


def test_resolves():
    """ Test: bind a resolver to one field of an object type """
    schema = graphql.build_schema('''
        type Query {
            greeting(name: String!): String!
            other: String
        }
    ''')

    @resolves(schema, 'Query', 'greeting')
    def resolve_greeting(root, info, name: str):
        return f'Hello, {name}'

    # The decorator gives the function back
    assert resolve_greeting(None, None, name='Alice') == 'Hello, Alice'

    # Only that field is bound
    res = graphql_query_sync(schema, 'query { greeting(name: "Alice") other }')
    assert res == {'greeting': 'Hello, Alice', 'other': None}
