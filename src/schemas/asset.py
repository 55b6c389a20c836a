"""Asset reference schemas.

Describes which markup elements carry local asset references and where a
referenced asset lands in the output tree.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator


class ReferenceSelector(BaseModel):
    """An (element, attribute) pair naming a reference-bearing element.

    Accepts either a mapping (``{"element": "img", "attribute": "src"}``) or
    a two-item sequence (``["img", "src"]``).

    Attributes:
        element: Lowercase element name, or ``*`` for any element
        attribute: Attribute holding the asset reference
    """

    element: str
    attribute: str

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("selector pairs must be (element, attribute)")
            return {"element": data[0], "attribute": data[1]}
        return data

    def matches(self, tag: str) -> bool:
        return self.element == "*" or self.element == tag.lower()


@dataclass(frozen=True)
class AssetPaths:
    """Resolved locations of one asset reference.

    Attributes:
        asset_path: Normalized ``template_dir / reference`` path
        dest_dir: Directory the asset is copied into
        dest_path: Full destination file path
        page_reference: Forward-slash reference relative to the page (``./...``)
    """

    asset_path: Path
    dest_dir: Path
    dest_path: Path
    page_reference: str
