"""
Static build
Renders every page of the site through the Flask test client and writes the
result, together with the site assets and content images, to a directory.
"""
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from flask import url_for

from personal_site.core.errors import BuildError

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    build_dir: Path
    pages: List[Path] = field(default_factory=list)
    attachments: List[Path] = field(default_factory=list)
    assets: List[Path] = field(default_factory=list)

    def summary(self):
        return (
            f'{len(self.pages)} page(s), {len(self.attachments)} attachment(s), '
            f'{len(self.assets)} asset(s) written to {self.build_dir}'
        )


class SiteFreezer:
    """Writes the site to disk as plain files"""

    def __init__(self, app):
        self.app = app
        self.client = app.test_client()

    def render_page(self, url, expected_status=200):
        """Render one URL, raising BuildError on an unexpected status"""
        response = self.client.get(url)
        try:
            if response.status_code != expected_status:
                raise BuildError(url, response.status_code, expected_status)
            return response.get_data()
        finally:
            response.close()

    def page_urls(self):
        """(url, output path, expected status) for every page, posts first"""
        blog = self.app.extensions['blog']
        with self.app.test_request_context():
            # slugs may hold ?, # or %, which must be quoted in the URL
            pages = [
                (url_for('blog.post_page', slug=post.slug), f'{post.slug}.html', 200)
                for post in blog.posts
            ]
        pages += [
            ('/blog.html', 'blog.html', 200),
            ('/index.html', 'index.html', 200),
            ('/css/highlight.css', 'css/highlight.css', 200),
            ('/404.html', '404.html', 404),
        ]
        return pages

    def copy_assets(self, build_dir):
        static_dir = Path(self.app.static_folder)
        copied = []
        for src in sorted(static_dir.rglob('*')):
            if not src.is_file():
                continue
            dst = build_dir / src.relative_to(static_dir)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dst)
            copied.append(dst)
        return copied

    def build(self, build_dir=None):
        """Wipe build_dir and write the whole site into it"""
        build_dir = Path(build_dir or self.app.config['BUILD_DIR'])
        report = BuildReport(build_dir=build_dir)

        if build_dir.exists():
            logger.info('Removing previous build at %s', build_dir)
            shutil.rmtree(build_dir)
        build_dir.mkdir(parents=True)

        report.attachments = self.app.extensions['attachments'].sync(build_dir)
        report.assets = self.copy_assets(build_dir)

        for url, relative_path, expected_status in self.page_urls():
            out = build_dir / relative_path
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_bytes(self.render_page(url, expected_status))
            logger.debug('Wrote %s -> %s', url, out)
            report.pages.append(out)

        logger.info('Build finished: %s', report.summary())
        return report
