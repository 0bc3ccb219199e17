"""Property-based tests for validation and template substitution.

Verifies:
- Validator idempotence: validating an unchanged tree twice gives equal results
- Short-circuit: trees without lib/include/bin never reach artifact checks
- OR-acceptance: markers plus libraries or headers validate; markers alone do not
- Placeholder substitution: known keys replaced, unknown keys untouched
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from taqyon.discovery.platform_profile import MARKER_DIRS, build_profile
from taqyon.discovery.validator import DirectoryValidator
from taqyon.scaffold.templates import replace_placeholders


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

platform_kinds = st.sampled_from(["windows", "macos", "linux"])
marker_subsets = st.sets(st.sampled_from(MARKER_DIRS))
placeholder_keys = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_",
    min_size=1,
    max_size=12,
)
plain_text = st.text(
    alphabet=st.characters(blacklist_characters="{}", blacklist_categories=("Cs",)),
    max_size=40,
)

# Library artifact per platform, relative to the root.
LIBRARY_FILES = {
    "windows": "lib/Qt6Core.lib",
    "macos": "lib/libQt6Core.dylib",
    "linux": "lib/libQt6Core.so",
}


def _build_tree(
    root: Path, kind: str, markers: set[str], library: bool, headers: bool,
) -> None:
    for marker in markers:
        (root / marker).mkdir(parents=True, exist_ok=True)
    if library:
        lib = root / LIBRARY_FILES[kind]
        lib.parent.mkdir(parents=True, exist_ok=True)
        lib.write_text("")
    if headers:
        (root / "include" / "QtCore").mkdir(parents=True, exist_ok=True)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidatorProperties:
    """Formal guarantees of DirectoryValidator."""

    @settings(max_examples=40, deadline=None)
    @given(
        kind=platform_kinds,
        markers=marker_subsets,
        library=st.booleans(),
        headers=st.booleans(),
    )
    def test_validation_is_idempotent(
        self, kind: str, markers: set[str], library: bool, headers: bool,
    ) -> None:
        """Two validations of the same unchanged tree are equal."""
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "qt"
            root.mkdir()
            _build_tree(root, kind, markers, library, headers)
            validator = DirectoryValidator(build_profile(kind, home=tmp, environ={}))
            assert validator.validate(root) == validator.validate(root)

    @settings(max_examples=40, deadline=None)
    @given(kind=platform_kinds, library=st.booleans(), headers=st.booleans())
    def test_or_acceptance(self, kind: str, library: bool, headers: bool) -> None:
        """With all markers present, valid iff library or headers exist."""
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "qt"
            root.mkdir()
            _build_tree(root, kind, set(MARKER_DIRS), library, headers)
            validator = DirectoryValidator(build_profile(kind, home=tmp, environ={}))
            assert validator.validate(root).is_valid == (library or headers)

    @settings(max_examples=30, deadline=None)
    @given(
        kind=platform_kinds,
        names=st.lists(
            st.sampled_from(["docs", "share", "Qt6Core", "libQt6Core.so", "QtCore", "etc"]),
            max_size=4,
            unique=True,
        ),
    )
    def test_markerless_trees_are_rejected(self, kind: str, names: list[str]) -> None:
        """No lib/include/bin means invalid and no artifact checks."""
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "qt"
            root.mkdir()
            for name in names:
                (root / name).mkdir()
            validator = DirectoryValidator(build_profile(kind, home=tmp, environ={}))
            result = validator.validate(root)
            assert result.is_valid is False
            assert result.checked_artifacts is False


# ---------------------------------------------------------------------------
# Placeholder substitution
# ---------------------------------------------------------------------------


class TestPlaceholderProperties:
    """Formal guarantees of replace_placeholders."""

    @given(text=plain_text, replacements=st.dictionaries(placeholder_keys, plain_text))
    def test_text_without_braces_unchanged(
        self, text: str, replacements: dict[str, str],
    ) -> None:
        assert replace_placeholders(text, replacements) == text

    @given(key=placeholder_keys, value=plain_text, prefix=plain_text, suffix=plain_text)
    def test_known_key_replaced(self, key: str, value: str, prefix: str, suffix: str) -> None:
        content = f"{prefix}{{{{{key}}}}}{suffix}"
        assert replace_placeholders(content, {key: value}) == f"{prefix}{value}{suffix}"

    @given(key=placeholder_keys, other=placeholder_keys, value=plain_text)
    def test_unknown_key_untouched(self, key: str, other: str, value: str) -> None:
        assume(key != other)
        content = f"{{{{{key}}}}}"
        assert replace_placeholders(content, {other: value}) == content

    @given(
        keys=st.lists(placeholder_keys, min_size=1, max_size=5, unique=True),
        value=plain_text,
    )
    def test_empty_mapping_is_identity(self, keys: list[str], value: str) -> None:
        content = value.join(f"{{{{{k}}}}}" for k in keys)
        assert replace_placeholders(content, {}) == content
