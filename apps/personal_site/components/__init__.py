"""
Site components
Each component is a blueprint with its routes, templates and a service.
"""
from .attachments import init_attachments
from .blog import init_blog
from .profile_header import init_profile_header

__all__ = ['init_attachments', 'init_blog', 'init_profile_header']
