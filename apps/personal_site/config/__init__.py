"""
Configuration for the personal site
"""
from .settings import SiteConfig, PACKAGE_DIR

__all__ = ['SiteConfig', 'PACKAGE_DIR']
