import os.path

import graphql

# Load GraphQL definitions from the file
pwd = os.path.dirname(__file__)

# Get this schema
with open(os.path.join(pwd, './persons.graphql'), 'rt') as f:
    graphql_persons_schema = f.read()


def resolves(schema: graphql.GraphQLSchema, type_name: str, field_name: str):
    """ Decorator: make the function resolve `type_name.field_name`

    Example:
        @resolves(schema, 'Query', 'persons')
        def resolve_persons(root, info, first: int, cursor: str = None):
            ...
    """
    object_type: graphql.GraphQLObjectType = schema.type_map[type_name]  # type: ignore[assignment]
    field = object_type.fields[field_name]

    def decorator(func):
        field.resolve = func
        return func
    return decorator
