""" Client: incremental loading for virtualized lists

The HTTP transport lives in `cursorlist.client.http`: it needs httpx.
"""

from .transport import Transport, BoundaryTransport, GraphQLTransport
from .controller import IncrementalFetchController, FetchState, AccumulatedList
from .adapter import VirtualizedListAdapter, full_name, LOADING_PLACEHOLDER
