"""Log of the operations carried out during a session."""

from __future__ import annotations

from collections.abc import Iterator

_WIDTH = 62


class History:
    """Ordered list of operation descriptions."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def add(self, entry: str) -> None:
        """Record one operation."""
        self._entries.append(entry)

    def render(self) -> str:
        """Return the numbered listing of every recorded operation."""
        heavy = "=" * _WIDTH
        parts = [f"{heavy}\n  HISTORIAL DE OPERACIONES\n{heavy}\n"]
        if not self._entries:
            parts.append("  [!] No hay operaciones registradas aun.\n")
            return "".join(parts)
        parts.append(f"  Total de operaciones: {len(self._entries)}\n\n")
        parts.append("-" * _WIDTH + "\n")
        parts.extend(
            f"  {number:>3}.  {entry}\n"
            for number, entry in enumerate(self._entries, start=1)
        )
        parts.append(f"\n{heavy}\n")
        return "".join(parts)

    def clear(self) -> None:
        """Forget every recorded operation."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))