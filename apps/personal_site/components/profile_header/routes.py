"""
Profile Header Routes
The home page
"""
from flask import Blueprint, current_app, render_template

profile_header_bp = Blueprint('profile_header', __name__, template_folder='templates')


@profile_header_bp.route('/index.html')
@profile_header_bp.route('/')
def index():
    """Home page with the profile header"""
    profile = current_app.extensions['profile_header'].get_profile()
    return render_template('index.html', profile=profile)
