"""Testing generators – Hypothesis strategies for driver state."""
from search_driver.testing.generators.strategies import (
    filter_strategy,
    filters_strategy,
    paging_strategy,
)

__all__ = ["filter_strategy", "filters_strategy", "paging_strategy"]
