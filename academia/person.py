"""Abstract base for people known to the system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Person(ABC):
    """Anyone identified by a code and a name."""

    code: str = ""
    name: str = ""

    @abstractmethod
    def describe(self) -> str:
        """Return a multi-line description of this person."""

    def kind(self) -> str:
        """Return the kind of person, as shown to the user."""
        return "Persona"