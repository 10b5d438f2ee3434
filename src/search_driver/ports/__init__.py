"""Ports – protocols of the collaborators injected into the driver."""
from search_driver.ports.a11y import A11yNotifier
from search_driver.ports.connector import APIConnector
from search_driver.ports.url_sync import URLChangeCallback, URLSync, URLSyncFactory

__all__ = [
    "A11yNotifier",
    "APIConnector",
    "URLChangeCallback",
    "URLSync",
    "URLSyncFactory",
]
