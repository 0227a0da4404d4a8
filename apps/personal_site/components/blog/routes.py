"""
Blog Routes
Listing page, post pages and the code highlight stylesheet
"""
from flask import Blueprint, Response, abort, current_app, render_template

blog_bp = Blueprint('blog', __name__, template_folder='templates')


def get_blog_service():
    """Blog service for the current app, reloaded first when configured"""
    service = current_app.extensions['blog']
    if current_app.config.get('RELOAD_CONTENT'):
        service.load_posts()
    return service


@blog_bp.route('/blog.html')
def blog_index():
    """List posts, newest first"""
    service = get_blog_service()
    return render_template('blog_list.html', posts=service.posts)


@blog_bp.route('/<slug>.html')
def post_page(slug):
    """Render a single post"""
    post = get_blog_service().get_post(slug)
    if post is None:
        abort(404)
    return render_template('blog_post.html', post=post)


@blog_bp.route('/css/highlight.css')
def highlight_css():
    """Pygments stylesheet for the configured highlight style"""
    css = current_app.extensions['blog'].highlight_css()
    return Response(css, mimetype='text/css')
