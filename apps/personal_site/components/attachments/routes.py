"""
Attachments Routes
Serves content images at the site root during preview
"""
from flask import Blueprint, abort, current_app, send_from_directory

attachments_bp = Blueprint('attachments', __name__)


@attachments_bp.route('/<filename>')
def attachment(filename):
    """Serve a content image by file name"""
    service = current_app.extensions['attachments']
    path = service.find(filename)
    if path is None:
        abort(404)
    path = path.resolve()
    return send_from_directory(path.parent, path.name)
