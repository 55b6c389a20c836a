"""Tests for schema definitions."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from schemas import AssetPaths, Page, PageReport, ReferenceSelector, SiteReport


class TestReferenceSelector:
    """Tests for ReferenceSelector."""

    def test_from_mapping(self):
        """Selectors validate from a mapping."""
        selector = ReferenceSelector.model_validate({"element": "img", "attribute": "src"})
        assert (selector.element, selector.attribute) == ("img", "src")

    def test_from_pair(self):
        """Selectors validate from a two-item sequence."""
        selector = ReferenceSelector.model_validate(("source", "src"))
        assert (selector.element, selector.attribute) == ("source", "src")

    def test_rejects_wrong_length(self):
        """Sequences must have exactly two items."""
        with pytest.raises(ValidationError):
            ReferenceSelector.model_validate(["img"])

    def test_matches_tag_case_insensitively(self):
        """Element names match regardless of tag case."""
        selector = ReferenceSelector(element="img", attribute="src")
        assert selector.matches("IMG") is True
        assert selector.matches("video") is False

    def test_wildcard_matches_everything(self):
        """'*' matches any element."""
        assert ReferenceSelector(element="*", attribute="src").matches("audio") is True


class TestPage:
    """Tests for the Page dataclass."""

    def test_directories(self):
        """Template and output directories derive from the paths."""
        page = Page(
            input_path=Path("posts/a/index.md"),
            output_path=Path("_site/posts/a/index.html"),
        )

        assert page.template_dir == Path("posts/a")
        assert page.output_dir == Path("_site/posts/a")

    def test_output_dir_requires_output_path(self):
        """A page without output has no output directory."""
        page = Page(input_path=Path("posts/a/index.md"))

        with pytest.raises(ValueError):
            page.output_dir


class TestAssetPaths:
    """Tests for AssetPaths."""

    def test_is_immutable(self):
        """AssetPaths cannot be modified."""
        paths = AssetPaths(
            asset_path=Path("a/img/x.png"),
            dest_dir=Path("out/img"),
            dest_path=Path("out/img/x.png"),
            page_reference="./img/x.png",
        )

        with pytest.raises(AttributeError):
            paths.page_reference = "./other.png"


class TestReports:
    """Tests for PageReport and SiteReport."""

    def test_page_report_defaults(self):
        """Counters start at zero."""
        report = PageReport(input_path="posts/a/index.md", mode="parse")

        assert (report.found, report.processed, report.copied, report.skipped) == (0, 0, 0, 0)
        assert report.output_path is None

    def test_page_report_rejects_unknown_mode(self):
        """Reports only carry known modes."""
        with pytest.raises(ValidationError):
            PageReport(input_path="x", mode="crawl")

    def test_site_report_sums_copies(self):
        """SiteReport.copied sums the pages' copies."""
        report = SiteReport(
            input_dir="src",
            output_dir="_site",
            pages=[
                PageReport(input_path="a.md", mode="parse", copied=2),
                PageReport(input_path="b.md", mode="parse", copied=3),
            ],
        )

        assert report.copied == 5

    def test_site_report_serializes(self):
        """Reports dump to JSON like the other schemas."""
        report = SiteReport(input_dir="src", output_dir="_site", errors=["boom"])
        assert '"errors":["boom"]' in report.model_dump_json()
