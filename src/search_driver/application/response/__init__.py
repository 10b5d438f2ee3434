"""Application response – backend envelopes, paging math and the ResponseMapper."""
from search_driver.application.response.envelope import AutocompleteResponse, SearchResponse
from search_driver.application.response.mapper import ResponseMapper
from search_driver.application.response.pagination import PagingWindow, paging_window, total_pages

__all__ = [
    "AutocompleteResponse",
    "PagingWindow",
    "ResponseMapper",
    "SearchResponse",
    "paging_window",
    "total_pages",
]
