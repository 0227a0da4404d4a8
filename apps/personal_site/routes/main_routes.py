"""
Layout-level routes for the site
"""
import os

from flask import Blueprint, current_app, render_template, send_from_directory

main_bp = Blueprint('main', __name__)


@main_bp.route('/<any(css, img):folder>/<path:filename>')
def static_asset(folder, filename):
    """Serve site assets at the same paths they have in the build"""
    directory = os.path.join(current_app.static_folder, folder)
    return send_from_directory(directory, filename)


@main_bp.app_errorhandler(404)
def page_not_found(error):
    """Not found page inside the layout"""
    return render_template('404.html'), 404
