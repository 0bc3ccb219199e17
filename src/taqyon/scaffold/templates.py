"""Template directory copying with ``{{key}}`` placeholder substitution.

Templates ship inside the package under ``taqyon/templates``. Text files
have every ``{{name}}`` replaced when ``name`` is in the replacement map
and left untouched otherwise. Files that do not decode as UTF-8 are
copied byte-for-byte.
"""

from __future__ import annotations

import re
import shutil
from collections.abc import Mapping
from pathlib import Path

from taqyon.exceptions import TemplateError

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def template_root() -> Path:
    """Return the bundled templates directory."""
    return Path(__file__).resolve().parent.parent / "templates"


def replace_placeholders(content: str, replacements: Mapping[str, str]) -> str:
    """Replace ``{{key}}`` placeholders present in ``replacements``.

    Args:
        content: Text containing placeholders.
        replacements: Placeholder name to replacement text.

    Returns:
        The substituted text. Unknown placeholders are kept verbatim.
    """

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        return replacements[key] if key in replacements else match.group(0)

    return _PLACEHOLDER.sub(_sub, content)


def copy_file_with_dirs(src: Path, dest: Path) -> None:
    """Copy one file, creating the destination's parent directories."""
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
    except OSError as exc:
        raise TemplateError(f'Failed to copy file from "{src}" to "{dest}": {exc}') from exc


def copy_tree(src_dir: Path, dest_dir: Path) -> list[Path]:
    """Recursively copy ``src_dir`` into ``dest_dir`` without substitution.

    Returns:
        Destination paths of all copied files.
    """
    return _copy(src_dir, dest_dir, None)


def copy_tree_with_replace(
    src_dir: Path, dest_dir: Path, replacements: Mapping[str, str],
) -> list[Path]:
    """Recursively copy ``src_dir`` into ``dest_dir`` substituting placeholders.

    Returns:
        Destination paths of all copied files.
    """
    return _copy(src_dir, dest_dir, replacements)


def _copy(
    src_dir: Path, dest_dir: Path, replacements: Mapping[str, str] | None,
) -> list[Path]:
    if not src_dir.is_dir():
        raise TemplateError(f"Template directory not found: {src_dir}")
    copied: list[Path] = []
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        for entry in sorted(src_dir.iterdir()):
            target = dest_dir / entry.name
            if entry.is_dir():
                copied.extend(_copy(entry, target, replacements))
            elif replacements is None:
                shutil.copyfile(entry, target)
                copied.append(target)
            else:
                _write_substituted(entry, target, replacements)
                copied.append(target)
    except OSError as exc:
        raise TemplateError(
            f'Failed to copy template directory from "{src_dir}" to "{dest_dir}": {exc}'
        ) from exc
    return copied


def _write_substituted(
    src: Path, dest: Path, replacements: Mapping[str, str],
) -> None:
    raw = src.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        dest.write_bytes(raw)
        return
    dest.write_text(replace_placeholders(text, replacements), encoding="utf-8", newline="")
