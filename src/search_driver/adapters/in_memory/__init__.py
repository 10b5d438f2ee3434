"""In-memory adapter – an APIConnector over a list of documents."""
from search_driver.adapters.in_memory.connector import InMemoryAPIConnector

__all__ = ["InMemoryAPIConnector"]
