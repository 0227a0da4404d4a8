"""
Blog Service
Loads dated markdown posts from the content directory and renders them to HTML.

Post files are named YYYY-MM-DD-slug.md. The first level-1 heading is the post
title and is left out of the rendered body.
"""
import html
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import markdown
from markdown.extensions import Extension
from markdown.extensions.toc import stashedHTML2text
from markdown.treeprocessors import Treeprocessor
from markupsafe import Markup
from pygments.formatters import HtmlFormatter
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from personal_site.core.errors import ConfigError, InvalidPostFilename

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = 'codehilite'


@dataclass(frozen=True)
class BlogPost:
    title: str
    date: date
    slug: str
    html: Markup
    source: Path


class TitleTreeprocessor(Treeprocessor):
    """Pull the first top-level <h1> out of the document as the title"""

    def plain_text(self, element):
        """Heading text with escapes and stashed entities restored"""
        text = ''.join(element.itertext())
        text = self.md.treeprocessors['unescape'].unescape(text)
        text = stashedHTML2text(text, self.md, strip_entities=False)
        return html.unescape(text).strip()

    def run(self, root):
        self.md.post_title = ''
        for child in list(root):
            if child.tag == 'h1':
                self.md.post_title = self.plain_text(child)
                root.remove(child)
                break


class TitleExtension(Extension):

    def extendMarkdown(self, md):
        md.registerExtension(self)
        self.md = md
        md.post_title = ''
        # after inline patterns (20) and toc (5)
        md.treeprocessors.register(TitleTreeprocessor(md), 'post_title', 4)

    def reset(self):
        self.md.post_title = ''


def parse_post_filename(filename):
    """Split YYYY-MM-DD-slug.md into (date, slug)"""
    parts = filename.split('-', 3)
    if len(parts) < 4:
        raise InvalidPostFilename(filename)

    try:
        post_date = datetime.strptime('-'.join(parts[:3]), '%Y-%m-%d').date()
    except ValueError as e:
        raise InvalidPostFilename(filename, reason=str(e)) from e

    slug = parts[3]
    if slug.endswith('.md'):
        slug = slug[:-len('.md')]
    if not slug:
        raise InvalidPostFilename(filename, reason='empty slug')
    return post_date, slug


class BlogService:
    """Service for the Blog component"""

    def __init__(self, content_dir, highlight_style='github-dark',
                 linenums=True, guess_lang=True):
        self.content_dir = Path(content_dir)
        self.highlight_style = highlight_style
        self.posts: List[BlogPost] = []

        try:
            get_style_by_name(highlight_style)
        except ClassNotFound as e:
            raise ConfigError(f'unknown highlight style: {highlight_style}') from e

        self.linenums = linenums
        self.guess_lang = guess_lang

    def new_parser(self):
        """Fresh Markdown instance; instances keep per-document state"""
        return markdown.Markdown(
            extensions=[
                'tables',
                'fenced_code',
                'sane_lists',
                'toc',
                'codehilite',
                TitleExtension(),
            ],
            extension_configs={
                'codehilite': {
                    'css_class': HIGHLIGHT_CSS_CLASS,
                    'linenums': self.linenums,
                    'guess_lang': self.guess_lang,
                    'pygments_style': self.highlight_style,
                },
            },
            output_format='html',
        )

    def render(self, text):
        """Render markdown text, returning (title, body html)"""
        md = self.new_parser()
        body = md.convert(text)
        return md.post_title, Markup(body.strip())

    def load_post(self, path):
        """Load a single post file"""
        path = Path(path)
        post_date, slug = parse_post_filename(path.name)
        title, body = self.render(path.read_text(encoding='utf-8'))
        return BlogPost(title=title, date=post_date, slug=slug, html=body, source=path)

    def load_posts(self):
        """Load every post under the content directory, newest first"""
        if not self.content_dir.is_dir():
            logger.warning('Content directory %s not found, no posts loaded', self.content_dir)
            self.posts = []
            return self.posts

        posts = [
            self.load_post(path)
            for path in sorted(self.content_dir.rglob('*.md'))
            if path.is_file()
        ]

        seen = set()
        for post in posts:
            if post.slug in seen:
                logger.warning('Duplicate post slug %r (%s)', post.slug, post.source)
            seen.add(post.slug)

        posts.sort(key=lambda post: post.slug)
        posts.sort(key=lambda post: post.date, reverse=True)

        self.posts = posts
        logger.info('Loaded %d post(s) from %s', len(posts), self.content_dir)
        return self.posts

    def get_post(self, slug) -> Optional[BlogPost]:
        for post in self.posts:
            if post.slug == slug:
                return post
        return None

    def highlight_css(self):
        """Pygments stylesheet for highlighted code blocks"""
        formatter = HtmlFormatter(style=self.highlight_style)
        return formatter.get_style_defs(f'.{HIGHLIGHT_CSS_CLASS}')
