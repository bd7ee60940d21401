__version__ = __import__('importlib.metadata').metadata.version('cursorlist')

from .page import Page, Edge, PageInfo
from .resolver import resolve_page
from .boundary import QueryBoundary
from .settings import PagerSettings, DEFAULT_PAGE_SIZE

from . import source
from . import exc
