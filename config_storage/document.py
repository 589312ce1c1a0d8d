from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import JsonValue, RootModel, ValidationError

from .errors import MalformedDocumentError


class ConfigDocument(RootModel[dict[str, JsonValue]]):
    """
    The whole backing file: a JSON object at the root, anything JSON below it.
    """

    @classmethod
    def from_disk_doc(cls, doc: Any, *, path: Path) -> "ConfigDocument":
        if not isinstance(doc, dict):
            raise MalformedDocumentError(path, f"root must be a JSON object, got {type(doc).__name__}")
        try:
            return cls.model_validate(doc)
        except ValidationError as exc:
            raise MalformedDocumentError(path, "document is not plain JSON") from exc

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
