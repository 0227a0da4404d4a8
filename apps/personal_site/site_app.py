"""
Personal site
Flask application that renders the profile page and blog, and freezes them
into a static build
"""
import logging
import sys

import click
from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from personal_site.components import init_attachments, init_blog, init_profile_header
from personal_site.config import SiteConfig
from personal_site.core import SiteError, SiteFreezer, setup_logging
from personal_site.routes import main_bp

logger = logging.getLogger(__name__)


class SiteApp:
    """Main site application class"""

    def __init__(self, config_object=SiteConfig, overrides=None):
        self.config_object = config_object
        self.overrides = overrides or {}
        self.app = None

    def create_app(self):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(self.config_object)
        self.app.config.update(self.overrides)

        # Rate limiting applies to the preview server only
        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        # Initialize components
        init_profile_header(self.app)
        init_blog(self.app)
        init_attachments(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        return self.app

    def build(self, build_dir=None):
        """Write the static site"""
        return SiteFreezer(self.app).build(build_dir)

    def run(self, host=None, port=None):
        """Start the preview server"""
        host = host or self.app.config['HOST']
        port = port or self.app.config['PORT']

        logger.info("Personal site preview")
        logger.info("Starting on: http://%s:%s", host, port)
        logger.info("   - Home:  http://%s:%s/", host, port)
        logger.info("   - Blog:  http://%s:%s/blog.html", host, port)

        self.app.run(host=host, port=port, debug=False)


def create_app():
    """Entry point for `flask --app personal_site.site_app`"""
    return SiteApp().create_app()


@click.group()
@click.option('--log-level', default=SiteConfig.LOG_LEVEL, show_default=True,
              help='Logging level.')
def cli(log_level):
    """Build or preview the personal site."""
    setup_logging(log_level)


@cli.command('build')
@click.option('--out', 'build_dir', type=click.Path(file_okay=False),
              default=None, help='Build directory (default: SITE_BUILD_DIR).')
@click.option('--content', 'content_dir', type=click.Path(file_okay=False),
              default=None, help='Content directory (default: SITE_CONTENT_DIR).')
def build_command(build_dir, content_dir):
    """Render every page into the build directory."""
    overrides = {'RATELIMIT_ENABLED': False}
    if content_dir:
        overrides['CONTENT_DIR'] = content_dir

    try:
        site = SiteApp(overrides=overrides)
        site.create_app()
        report = site.build(build_dir)
    except SiteError as e:
        logger.error("Build failed: %s", e)
        sys.exit(1)

    click.echo(report.summary())


@cli.command('serve')
@click.option('--host', default=None, help='Bind address (default: SITE_HOST).')
@click.option('--port', type=int, default=None, help='Port (default: SITE_PORT).')
@click.option('--content', 'content_dir', type=click.Path(file_okay=False),
              default=None, help='Content directory (default: SITE_CONTENT_DIR).')
def serve_command(host, port, content_dir):
    """Run the preview server."""
    overrides = {'RELOAD_CONTENT': True}
    if content_dir:
        overrides['CONTENT_DIR'] = content_dir

    try:
        site = SiteApp(overrides=overrides)
        site.create_app()
    except SiteError as e:
        logger.error("Could not start preview: %s", e)
        sys.exit(1)

    site.run(host=host, port=port)


def main():
    """Main entry point"""
    cli()


if __name__ == '__main__':
    main()
