"""Document entities exchanged with the document API."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Document(BaseModel):
    """A stored document as returned by the list, get and search endpoints."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    path: str
    created_at: str
    body: str | None = None
    highlighted_content: str | None = None


@dataclass(frozen=True, slots=True)
class SelectedFile:
    """A local file picked for upload, either from a dialog or by drag-and-drop."""

    name: str
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path | str, content_type: str | None = None) -> "SelectedFile":
        source = Path(path)
        return cls(name=source.name, content=source.read_bytes(), content_type=content_type)

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot, or ``""`` when there is none."""

        if "." not in self.name:
            return ""
        return self.name.rsplit(".", 1)[1].lower()
