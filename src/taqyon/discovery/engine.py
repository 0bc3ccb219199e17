"""Ordered multi-strategy search for a Qt6 installation.

``DiscoveryEngine`` runs its strategies strictly in order and returns the
first candidate that ``DirectoryValidator`` accepts. The order is a trust
ranking: a ``qmake`` on PATH beats ``qtpaths``, which beats environment
variables, which beat guessed well-known paths, which beat a filesystem
search hit.

Nothing here raises. "Qt6 not found" is an ordinary outcome reported as
``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from taqyon.discovery.models import DiscoveryReport
from taqyon.discovery.platform_profile import PlatformProfile, build_profile
from taqyon.discovery.strategies import DiscoveryStrategy, default_strategies
from taqyon.discovery.validator import DirectoryValidator

logger = logging.getLogger(__name__)


class DiscoveryEngine:
    """Finds a validated Qt6 installation root on this machine.

    Usage::

        engine = DiscoveryEngine()
        root = engine.discover()
        if root is None:
            print("Qt6 not detected")
    """

    def __init__(
        self,
        profile: PlatformProfile | None = None,
        strategies: Sequence[DiscoveryStrategy] | None = None,
        validator: DirectoryValidator | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.profile = profile if profile is not None else build_profile()
        self.validator = (
            validator if validator is not None else DirectoryValidator(self.profile)
        )
        self.strategies: list[DiscoveryStrategy] = (
            list(strategies)
            if strategies is not None
            else default_strategies(self.profile, environ=environ)
        )

    def discover(self) -> str | None:
        """Return the first valid Qt6 root, or None."""
        return self.discover_with_trace().root

    def discover_with_trace(self) -> DiscoveryReport:
        """Run discovery and keep every validation attempt.

        Returns:
            A ``DiscoveryReport``; ``root`` is None when no strategy
            produced a valid candidate.
        """
        report = DiscoveryReport()
        seen: set[str] = set()
        for strategy in self.strategies:
            logger.debug("Trying strategy %s", strategy.name)
            try:
                for candidate in strategy.candidates():
                    if candidate in seen:
                        continue
                    seen.add(candidate)
                    result = self.validator.validate(candidate)
                    report.attempts.append(result)
                    if result.is_valid:
                        logger.info("Qt6 found at %s (%s)", candidate, strategy.name)
                        report.root = candidate
                        report.strategy = strategy.name
                        return report
            except Exception:
                logger.debug("Strategy %s failed", strategy.name, exc_info=True)
        logger.info("Qt6 was not detected automatically")
        return report
