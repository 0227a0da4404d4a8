"""
Core services shared by the site app and CLI
"""
from .errors import BuildError, ConfigError, InvalidPostFilename, SiteError
from .freezer import BuildReport, SiteFreezer
from .logging_config import setup_logging

__all__ = [
    'BuildError',
    'BuildReport',
    'ConfigError',
    'InvalidPostFilename',
    'SiteError',
    'SiteFreezer',
    'setup_logging',
]
