"""
Logging setup for the site CLI and preview server
"""
import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s - %(message)s'


def setup_logging(level='INFO'):
    """Configure root logging once"""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
