"""Project scaffolding: templates, generated artifacts and orchestration.

Public API::

    from taqyon.scaffold import ScaffoldAnswers, ScaffoldOrchestrator

    answers = ScaffoldAnswers(project_name="demo", frontend_framework="vue")
    result = ScaffoldOrchestrator(source).run(answers, Path.cwd())
"""

from __future__ import annotations

from taqyon.scaffold.answers import (
    FRAMEWORKS,
    LANGUAGES,
    AnswerSource,
    ScaffoldAnswers,
    validate_project_name,
)
from taqyon.scaffold.orchestrator import ScaffoldOrchestrator, ScaffoldResult
from taqyon.scaffold.rcfile import RC_FILENAME, TaqyonRC

__all__ = [
    "AnswerSource",
    "FRAMEWORKS",
    "LANGUAGES",
    "RC_FILENAME",
    "ScaffoldAnswers",
    "ScaffoldOrchestrator",
    "ScaffoldResult",
    "TaqyonRC",
    "validate_project_name",
]
