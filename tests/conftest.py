"""Pytest fixtures for page-assets tests."""

import pytest
from lxml import html

from schemas.page import Page


@pytest.fixture
def site(tmp_path):
    """Create a template tree with one post and its rendered output directory.

    Layout:
        src/posts/a/index.md
        src/posts/a/cover.png
        src/posts/a/img/photo.jpg
        src/posts/a/img/nested/deep.gif
        src/posts/a/notes.txt
        _site/posts/a/
    """
    input_dir = tmp_path / "src"
    output_dir = tmp_path / "_site"
    post_dir = input_dir / "posts" / "a"
    (post_dir / "img" / "nested").mkdir(parents=True)
    (post_dir / "index.md").write_text("# Post A\n")
    (post_dir / "cover.png").write_bytes(b"\x89PNG cover bytes")
    (post_dir / "img" / "photo.jpg").write_bytes(b"\xff\xd8 photo bytes")
    (post_dir / "img" / "nested" / "deep.gif").write_bytes(b"GIF89a deep bytes")
    (post_dir / "notes.txt").write_text("not an asset")

    page_dir = output_dir / "posts" / "a"
    page_dir.mkdir(parents=True)

    return {
        "input_dir": input_dir,
        "output_dir": output_dir,
        "post_dir": post_dir,
        "template": post_dir / "index.md",
        "page_dir": page_dir,
        "output": page_dir / "index.html",
    }


@pytest.fixture
def page(site):
    """Page pointing at the sample post."""
    return Page(input_path=site["template"], output_path=site["output"])


def make_html(*sources: str, extra: str = "") -> str:
    """Build a small rendered page with one img element per source."""
    images = "".join(f'<img src="{src}" alt="image {i}">' for i, src in enumerate(sources))
    return (
        "<!DOCTYPE html>\n"
        "<html><head><title>Post</title></head>"
        f"<body><h1>Post</h1><p>{images}</p>{extra}</body></html>"
    )


def image_attributes(markup: str) -> list[dict[str, str]]:
    """Return the attributes of every img element, in document order."""
    root = html.document_fromstring(markup)
    return [dict(img.attrib) for img in root.iter("img")]
