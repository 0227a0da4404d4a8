"""Root conftest: app, client and a sample content directory."""

import base64

import pytest

from personal_site.site_app import SiteApp

PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)

FIRST_POST = """# First Post

Intro paragraph.

# Second Heading

```python
def greet():
    return "hi"
```
"""

NEWER_POST = """# Newer Post

| a | b |
|---|---|
| 1 | 2 |
"""

OLD_POST = """# Old Post

Nested under notes.
"""


@pytest.fixture
def content_dir(tmp_path):
    content = tmp_path / "content"
    (content / "notes").mkdir(parents=True)
    (content / "img").mkdir()

    (content / "2024-01-15-first-post.md").write_text(FIRST_POST, encoding="utf-8")
    (content / "2024-03-02-newer-post.md").write_text(NEWER_POST, encoding="utf-8")
    (content / "notes" / "2023-12-31-old-post.md").write_text(OLD_POST, encoding="utf-8")

    (content / "img" / "diagram.png").write_bytes(PNG_BYTES)
    (content / "notes" / "photo.JPG").write_bytes(PNG_BYTES)
    (content / "notes" / "readme.txt").write_text("not an image", encoding="utf-8")
    return content


@pytest.fixture
def build_dir(tmp_path):
    return tmp_path / "build"


@pytest.fixture
def site(content_dir, build_dir):
    site = SiteApp(overrides={
        "TESTING": True,
        "CONTENT_DIR": str(content_dir),
        "BUILD_DIR": str(build_dir),
        "RATELIMIT_ENABLED": False,
    })
    site.create_app()
    return site


@pytest.fixture
def app(site):
    return site.app


@pytest.fixture
def client(app):
    return app.test_client()
