"""
search_driver – headless state driver for search user interfaces.

Import path convention::

    from search_driver import SearchDriver, DEFAULT_STATE
    from search_driver.kernel.errors import ValidationError
    from search_driver.application.query import SearchQueryConfig
    from search_driver.adapters.in_memory import InMemoryAPIConnector
"""

from search_driver.application.state import DEFAULT_STATE, Filter, SearchState
from search_driver.driver import SearchDriver

__version__ = "0.1.0"
__all__ = ["DEFAULT_STATE", "Filter", "SearchDriver", "SearchState", "__version__"]
