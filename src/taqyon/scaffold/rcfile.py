"""The ``.taqyonrc`` project record.

A small JSON object written at the root of every generated project. Its
``qt6Path`` key holds the validated Qt6 root, or an explicit ``null``
when detection failed, so later tooling (``taqyon test-qt``, the
generated ``setup:qt`` script) can tell "not found" from "never ran".
Unknown keys are preserved on rewrite.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from taqyon.exceptions import ConfigError

RC_FILENAME = ".taqyonrc"
QT_PATH_KEY = "qt6Path"


@dataclass
class TaqyonRC:
    """In-memory form of a ``.taqyonrc`` file.

    Attributes:
        qt6_path: Validated Qt6 root, or None.
        extra: Any other keys found in the file.
    """

    qt6_path: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object, always including ``qt6Path``."""
        data = dict(self.extra)
        data[QT_PATH_KEY] = self.qt6_path
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2) + "\n"

    def write(self, path: Path) -> None:
        """Write the record to ``path``.

        Raises:
            ConfigError: If the file cannot be written.
        """
        try:
            path.write_text(self.to_json(), encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to write {path}: {exc}") from exc

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaqyonRC:
        value = data.get(QT_PATH_KEY)
        extra = {k: v for k, v in data.items() if k != QT_PATH_KEY}
        return cls(qt6_path=value if isinstance(value, str) and value else None, extra=extra)

    @classmethod
    def read(cls, path: Path) -> TaqyonRC:
        """Load a record; a missing or empty file reads as an empty record.

        Raises:
            ConfigError: If the file is unreadable or not a JSON object.
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        except OSError as exc:
            raise ConfigError(f"Failed to read {path}: {exc}") from exc
        if not raw.strip():
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")
        return cls.from_dict(data)


def rc_path(project_root: Path) -> Path:
    return project_root / RC_FILENAME
