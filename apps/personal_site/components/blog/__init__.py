"""
Blog Component
Markdown posts rendered into the site layout
"""
from .routes import blog_bp, get_blog_service
from .service import BlogPost, BlogService, parse_post_filename


def init_blog(app):
    """Initialize Blog component with Flask app and load posts"""
    service = BlogService(
        app.config['CONTENT_DIR'],
        highlight_style=app.config['HIGHLIGHT_STYLE'],
        linenums=app.config['HIGHLIGHT_LINENUMS'],
        guess_lang=app.config['HIGHLIGHT_GUESS_LANG'],
    )
    service.load_posts()
    app.extensions['blog'] = service
    app.register_blueprint(blog_bp)
    return service

__all__ = [
    'blog_bp',
    'BlogPost',
    'BlogService',
    'get_blog_service',
    'init_blog',
    'parse_post_filename',
]
