""" Request and response models """

from typing import Optional, Any

import pydantic


class PersonModel(pydantic.BaseModel):
    """ Person record """
    id: str
    firstname: str
    lastname: str


class EdgeModel(pydantic.BaseModel):
    """ Paginated item """
    cursor: str
    node: PersonModel


class PageInfoModel(pydantic.BaseModel):
    """ Page metadata """
    endCursor: Optional[str]
    hasNextPage: bool


class ConnectionModel(pydantic.BaseModel):
    """ A page of persons """
    edges: list[EdgeModel]
    pageInfo: PageInfoModel


class GraphQLRequestModel(pydantic.BaseModel):
    """ GraphQL request body """
    query: str
    variables: Optional[dict[str, Any]] = None
    operationName: Optional[str] = None
