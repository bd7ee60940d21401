""" Tools for testing """

from .graphql import graphql_query_sync
from .table_data import insert
