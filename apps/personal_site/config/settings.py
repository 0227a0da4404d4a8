"""
Site configuration settings
"""
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class SiteConfig:
    """Centralized configuration for the personal site"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'personal-site-preview')

    # Content and build locations
    CONTENT_DIR = os.environ.get('SITE_CONTENT_DIR', 'content')
    BUILD_DIR = os.environ.get('SITE_BUILD_DIR', 'build')
    RELOAD_CONTENT = os.environ.get('SITE_RELOAD_CONTENT', '0') == '1'

    # Markdown rendering
    HIGHLIGHT_STYLE = os.environ.get('SITE_HIGHLIGHT_STYLE', 'github-dark')
    HIGHLIGHT_LINENUMS = True
    HIGHLIGHT_GUESS_LANG = True
    ATTACHMENT_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.webp', '.gif')

    # Preview server
    HOST = os.environ.get('SITE_HOST', '127.0.0.1')
    PORT = int(os.environ.get('SITE_PORT', 3000))
    LOG_LEVEL = os.environ.get('SITE_LOG_LEVEL', 'INFO')

    # Rate limiting (preview server only)
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Page metadata
    SITE_TITLE = 'melonlorrd'
    SITE_DESCRIPTION = 'Personal website.'

    PROFILE = {
        'name': 'Mahaprasad',
        'handle': 'melonlorrd',
        'heading': 'Hello and Namaste!',
        'image': '/img/profile.png',
        'image_alt': 'Profile',
        'description': (
            "Hi, I'm Mahaprasad (melonlorrd), a Cloud Engineer passionate about "
            "Backend Systems, Linux, and Cloud-Native Tech. "
            "I currently work at RTDS as a Cloud-DevOps Engineer, building "
            "infrastructure and improving developer platform. "
            "In my free time, I enjoy sketching."
        ),
    }

    SOCIAL_LINKS = [
        {'label': 'GitHub', 'url': 'https://github.com/snwzd'},
        {'label': 'LinkedIn', 'url': 'https://www.linkedin.com/in/mprasadme'},
    ]
