"""Taqyon exception hierarchy.

All public exceptions inherit from TaqyonError, giving the CLI a single
base class to catch for run-ending failures. The Qt discovery subsystem
raises none of these: a missing Qt installation is reported as ``None``.
"""


class TaqyonError(Exception):
    """Base exception for all Taqyon errors."""


class TemplateError(TaqyonError):
    """Raised when a template file or directory cannot be copied.

    Covers missing template directories, unreadable source files and
    destination write failures during template materialization.
    """


class ScaffoldError(TaqyonError):
    """Raised when the project tree cannot be created or is incomplete.

    Covers an uncreatable project root and generated artifacts that are
    missing after their scaffolding step completed.
    """


class ConfigError(TaqyonError):
    """Raised when a ``.taqyonrc`` record cannot be read or written."""
