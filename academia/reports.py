"""The contract every report provider fulfils."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Report(ABC):
    """Something able to render the four standard academic reports."""

    @abstractmethod
    def cards(self) -> str:
        """Render the record card of every student."""

    @abstractmethod
    def averages(self) -> str:
        """Render the average of every student with grades."""

    @abstractmethod
    def ranking(self) -> str:
        """Render students ordered by average, best first."""

    @abstractmethod
    def statistics(self) -> str:
        """Render overall statistics."""