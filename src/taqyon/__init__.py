"""Taqyon: scaffolding for Qt6 + web frontend desktop applications."""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"
