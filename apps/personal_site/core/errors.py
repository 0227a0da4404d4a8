"""
Exceptions raised while loading content and building the site
"""


class SiteError(Exception):
    """Base class for site errors"""


class ConfigError(SiteError):
    """Raised when a configuration value cannot be used"""


class InvalidPostFilename(SiteError):
    """Raised when a post file name is not YYYY-MM-DD-slug.md"""

    def __init__(self, filename, reason='expected YYYY-MM-DD-slug.md'):
        self.filename = filename
        self.reason = reason
        super().__init__(f'invalid filename format: {filename} ({reason})')


class BuildError(SiteError):
    """Raised when a page fails to render during a static build"""

    def __init__(self, url, status_code, expected_status=200):
        self.url = url
        self.status_code = status_code
        self.expected_status = expected_status
        super().__init__(
            f'{url} rendered with HTTP {status_code}, expected {expected_status}'
        )
