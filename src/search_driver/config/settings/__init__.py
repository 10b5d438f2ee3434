"""Config settings – 12-factor env-based driver configuration."""
from search_driver.config.settings.base import Settings
from search_driver.config.settings.driver import DriverSettings
from search_driver.config.settings.factory import SettingsFactory
from search_driver.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "DriverSettings",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
