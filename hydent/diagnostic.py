"""Structures describing compiler diagnostics."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from hydent.span import Span


@dataclass(frozen=True)
class Highlight:
    """A highlighted source region, optionally labelled."""

    span: Span
    label: Optional[str] = None
    is_primary: bool = False


@dataclass(frozen=True)
class Suggestion:
    """Advice for fixing a diagnostic, optionally with a replacement."""

    message: str
    replacement_span: Optional[Span] = None
    replacement_text: Optional[str] = None


class DiagnosticLevel(enum.Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class CompilerDiagnosticPattern(ABC):
    """Base for a kind of diagnostic the compiler can report."""

    @abstractmethod
    def error_code(self) -> int:
        """The diagnostic's numeric code."""

    @abstractmethod
    def level(self) -> DiagnosticLevel:
        """The diagnostic's severity."""

    @abstractmethod
    def primary_message(self) -> str:
        """A concise description of the issue."""

    @abstractmethod
    def primary_span(self) -> Span:
        """The main location of the issue."""

    @abstractmethod
    def highlights(self) -> list[Highlight]:
        """Further regions giving context."""

    @abstractmethod
    def notes(self) -> list[str]:
        """Supplementary explanations."""

    @abstractmethod
    def suggestions(self) -> list[Suggestion]:
        """Ways to resolve the issue."""

    def documentation_url(self) -> Optional[str]:
        """A link to documentation for this diagnostic's code."""
        return f"https://doc.****.com/error_codes/E{self.error_code():04d}.html"