"""
Attachments Component
"""
from .routes import attachments_bp
from .service import AttachmentsService


def init_attachments(app):
    """Initialize Attachments component with Flask app"""
    service = AttachmentsService(
        app.config['CONTENT_DIR'],
        extensions=app.config['ATTACHMENT_EXTENSIONS'],
    )
    app.extensions['attachments'] = service
    app.register_blueprint(attachments_bp)
    return service

__all__ = ['attachments_bp', 'AttachmentsService', 'init_attachments']
