"""Shared test helpers for scaffold tests."""

from __future__ import annotations

from taqyon.scaffold import AnswerSource, ScaffoldAnswers


class CannedAnswerSource(AnswerSource):
    """AnswerSource returning fixed answers and a fixed manual Qt path."""

    def __init__(self, answers: ScaffoldAnswers, qt_path: str = "") -> None:
        self.answers = answers
        self.qt_path = qt_path
        self.qt_path_requests = 0

    def collect(self) -> ScaffoldAnswers:
        return self.answers

    def ask_qt_path(self) -> str:
        self.qt_path_requests += 1
        return self.qt_path
