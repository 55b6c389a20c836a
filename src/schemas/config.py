"""Page asset configuration schema.

The configuration is built once at setup and is immutable afterwards. Every
option can be given either by its camelCase name (``postsMatching``) or by
its attribute name (``posts_matching``).
"""

import hashlib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .asset import ReferenceSelector

DEFAULT_SELECTORS = (ReferenceSelector(element="img", attribute="src"),)


class PageAssetsConfig(BaseModel):
    """Options controlling asset discovery, hashing and copying.

    Attributes:
        mode: ``parse`` rewrites references found in markup, ``directory``
            copies files found next to the template
        posts_matching: Glob selecting eligible template paths
        assets_matching: Glob selecting asset references or files; ``|``
            separates alternatives
        recursive: Directory mode only; descend into subdirectories
        hash_assets: Parse mode only; content-address assets into the
            page's output directory
        hashing_alg: hashlib algorithm name
        hashing_digest: Text encoding of the digest
        force_copy: Copy even when mtime and size match
        add_integrity_attribute: Write ``<alg>-<digest>`` onto the element
        silent: Suppress progress logging
        selectors: Ordered (element, attribute) pairs carrying references
        search_paths: Fallback roots probed after the template directory
        markup_extensions: Output extensions treated as rendered pages
        max_workers: Bound on concurrent asset tasks per page
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    mode: Literal["parse", "directory"] = "parse"
    posts_matching: str = "*.md"
    assets_matching: str = "*.png|*.jpg|*.gif"
    recursive: bool = False
    hash_assets: bool = True
    hashing_alg: str = "sha1"
    hashing_digest: Literal["hex", "base64", "base64url"] = "hex"
    force_copy: bool = False
    add_integrity_attribute: bool = True
    silent: bool = False
    selectors: tuple[ReferenceSelector, ...] = DEFAULT_SELECTORS
    search_paths: tuple[Path, ...] = ()
    markup_extensions: tuple[str, ...] = (".html",)
    max_workers: int | None = Field(default=None, ge=1)

    @field_validator("hashing_alg")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        name = value.lower()
        # shake digests need an explicit length
        if name.startswith("shake_") or name not in hashlib.algorithms_available:
            raise ValueError(f"unsupported hashing algorithm: {value}")
        return name

    @field_validator("markup_extensions")
    @classmethod
    def _dotted_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value
        )

    @field_validator("selectors")
    @classmethod
    def _at_least_one_selector(
        cls, value: tuple[ReferenceSelector, ...]
    ) -> tuple[ReferenceSelector, ...]:
        if not value:
            raise ValueError("at least one selector is required")
        return value
