"""
Attachments Service
Copies images that sit next to the markdown content into the build
"""
import logging
import shutil
from pathlib import Path

from personal_site.config import SiteConfig

logger = logging.getLogger(__name__)


class AttachmentsService:
    """Service for content images (screenshots, diagrams, ...)"""

    def __init__(self, content_dir, extensions=SiteConfig.ATTACHMENT_EXTENSIONS):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def is_image(self, path):
        """Check a path against the attachment extensions"""
        return Path(path).suffix.lower() in self.extensions

    def list_images(self):
        """All images under the content directory, sorted by path"""
        if not self.content_dir.is_dir():
            return []
        return sorted(
            path for path in self.content_dir.rglob('*')
            if path.is_file() and self.is_image(path)
        )

    def sync(self, out_dir):
        """Copy every content image to out_dir/<basename>

        Images are flattened by file name, so a later image with the same
        name overwrites an earlier one. Returns the destination paths.
        """
        out_dir = Path(out_dir)
        copied = []

        for src in self.list_images():
            dst = out_dir / src.name
            if src.resolve() == dst.resolve():
                logger.debug('Skipping %s, already in place', src)
                continue
            shutil.copyfile(src, dst)
            copied.append(dst)

        logger.info('Synced %d attachment(s) into %s', len(copied), out_dir)
        return copied

    def find(self, filename):
        """Resolve a preview request to a content image, or None"""
        if Path(filename).name != filename or not self.is_image(filename):
            return None

        match = None
        for path in self.list_images():
            if path.name == filename:
                match = path
        return match
