""" The FastAPI application: GraphQL endpoint + a plain REST endpoint """

from __future__ import annotations

import logging
from typing import Optional

import fastapi
import graphql
from fastapi.responses import JSONResponse

from cursorlist import exc
from cursorlist.boundary import QueryBoundary
from cursorlist.integration.graphql import build_persons_schema
from .models import ConnectionModel, GraphQLRequestModel

logger = logging.getLogger(__name__)


def create_app(boundary: QueryBoundary = None) -> fastapi.FastAPI:
    """ Create an app that serves pages from the Query Boundary

    Endpoints:
        POST /graphql: the GraphQL `persons` query
        GET /persons?first=20&cursor=...: the same, as JSON

    Args:
        boundary: The Query Boundary to serve. Default: the reference scenario
    """
    boundary = boundary or QueryBoundary.reference()
    schema = build_persons_schema(boundary)

    app = fastapi.FastAPI(title='cursorlist')

    @app.exception_handler(exc.InvalidArgumentError)
    async def invalid_argument_handler(request: fastapi.Request, e: exc.InvalidArgumentError):
        return JSONResponse(status_code=400, content={'detail': str(e)})

    @app.post('/graphql')
    async def graphql_endpoint(request: GraphQLRequestModel):
        res = await graphql.graphql(
            schema,
            request.query,
            variable_values=request.variables,
            operation_name=request.operationName,
        )

        response: dict = {'data': res.data}
        if res.errors:
            logger.warning(f'GraphQL errors: {res.errors!r}')
            response['errors'] = [error.formatted for error in res.errors]
        return response

    @app.get('/persons', response_model=ConnectionModel)
    def persons_endpoint(
            first: Optional[int] = fastapi.Query(
                None,
                title='Pagination. The number of items to include.',
            ),
            cursor: Optional[str] = fastapi.Query(
                None,
                title='Pagination. The `endCursor` of the previous page.',
            ),
    ):
        # `first` is validated by the boundary: a missing value is reported like any other invalid value
        return boundary.query(first=first, cursor=cursor).connection_dict()

    return app
