"""Validation of a user-supplied Qt6 path.

Users often point at the version directory of an online-installer tree
(``~/Qt/6.5.0``) rather than the kit inside it (``~/Qt/6.5.0/gcc_64``).
``UserPathResolver`` accepts the path itself when it validates and
otherwise tries the conventional kit subdirectories beneath it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from taqyon.discovery.models import ValidationResult
from taqyon.discovery.validator import DirectoryValidator

logger = logging.getLogger(__name__)

# Kit and packaging subdirectories tried under a user path, in order.
QT_SUBDIRS: tuple[str, ...] = (
    "macos", "clang_64", "gcc_64", "msvc2019_64", "lib", "Qt6",
)


class UserPathResolver:
    """Resolves a manually entered path to a validated Qt6 root."""

    def __init__(
        self,
        validator: DirectoryValidator | None = None,
        subdirs: Sequence[str] = QT_SUBDIRS,
    ) -> None:
        self.validator = validator if validator is not None else DirectoryValidator()
        self.subdirs = tuple(subdirs)
        self.attempts: list[ValidationResult] = []

    def resolve(self, user_path: str | None) -> str | None:
        """Return the validated root for ``user_path``, or None.

        Args:
            user_path: Path typed by the user. Blank means "skip".
        """
        self.attempts = []
        if user_path is None or not user_path.strip():
            return None

        base = os.path.expanduser(user_path.strip())
        logger.debug("Validating user-provided Qt path: %s", base)
        for candidate in [base, *(os.path.join(base, sub) for sub in self.subdirs)]:
            result = self.validator.validate(candidate)
            self.attempts.append(result)
            if result.is_valid:
                logger.info("User-provided Qt path is valid: %s", candidate)
                return candidate

        logger.debug("Could not validate the Qt path: %s", base)
        return None
