"""URL adapter – query-string serialisation of the URL-tracked state."""
from search_driver.adapters.url.codec import URL_TRACKED_FIELDS, parse_query_string, to_query_string
from search_driver.adapters.url.manager import InMemoryLocation, QueryStringURLManager

__all__ = [
    "InMemoryLocation",
    "QueryStringURLManager",
    "URL_TRACKED_FIELDS",
    "parse_query_string",
    "to_query_string",
]
