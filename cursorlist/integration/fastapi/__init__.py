""" Integration with FastAPI: serve pages over HTTP """

from .app import create_app
from .models import ConnectionModel, GraphQLRequestModel
