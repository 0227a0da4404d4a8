"""
Profile Header Component
Image, greeting, short bio and social links on the home page
"""
from .routes import profile_header_bp
from .service import ProfileHeaderService


def init_profile_header(app):
    """Initialize Profile Header component with Flask app"""
    service = ProfileHeaderService(app.config)
    app.extensions['profile_header'] = service
    app.register_blueprint(profile_header_bp)
    return service

__all__ = ['profile_header_bp', 'ProfileHeaderService', 'init_profile_header']
