"""A11y adapter – logging announcer."""
from search_driver.adapters.a11y.logging_notifier import LoggingA11yNotifier

__all__ = ["LoggingA11yNotifier"]
