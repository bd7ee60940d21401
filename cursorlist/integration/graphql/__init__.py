""" Integration with GraphQL: graphql-core """

from .persons import build_persons_schema, PERSONS_QUERY
from .schema import graphql_persons_schema, resolves
