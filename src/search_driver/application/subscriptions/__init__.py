"""Application subscriptions – state-change pub/sub."""
from search_driver.application.subscriptions.hub import StateSubscriber, SubscriptionHub

__all__ = ["StateSubscriber", "SubscriptionHub"]
