"""Page domain object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Page:
    """A rendered page as seen by the asset transforms.

    Attributes:
        input_path: Template source file the page was rendered from
        output_path: Rendered destination file (None when the host writes nothing)
    """

    input_path: Path
    output_path: Path | None = None

    @property
    def template_dir(self) -> Path:
        return self.input_path.parent

    @property
    def output_dir(self) -> Path:
        if self.output_path is None:
            raise ValueError(f"page {self.input_path} has no output path")
        return self.output_path.parent
