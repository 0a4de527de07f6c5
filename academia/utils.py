"""Small helpers: timestamps, random quotes and codes, status labels."""

from __future__ import annotations

import random
from datetime import datetime

from academia.definitions import (
    APPROVAL_THRESHOLD,
    CODE_LENGTH,
    RECOVERY_THRESHOLD,
)

QUOTES: tuple[str, ...] = (
    '"El conocimiento es poder." - Francis Bacon',
    '"Educacion es el arma mas poderosa." - N. Mandela',
    '"Aprender es un tesoro que sigue a su dueno."',
    '"La educacion cambia el mundo."',
    '"Cada dia es una nueva oportunidad de aprender."',
    '"La constancia es la clave del exito academico."',
    '"Estudia hoy, lidera manana."',
    '"El esfuerzo de hoy es el exito de manana."',
)


def timestamp(now: datetime | None = None) -> str:
    """Format a moment (local now by default) as ``dd/mm/yyyy hh:mm``."""
    moment = now if now is not None else datetime.now()
    return (
        f"{moment.day:02d}/{moment.month:02d}/{moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def random_quote(rng: random.Random | None = None) -> str:
    """Pick one of the motivational quotes at random."""
    return (rng or random).choice(QUOTES)


def random_code(rng: random.Random | None = None) -> str:
    """Build a random student code made of digits."""
    source = rng or random
    return "".join(str(source.randrange(10)) for _ in range(CODE_LENGTH))


def status_label(average: float) -> str:
    """Bracketed label for an average, as shown in reports."""
    if average >= APPROVAL_THRESHOLD:
        return "[APROBADO]"
    if average >= RECOVERY_THRESHOLD:
        return "[RECUPERACION]"
    return "[DESAPROBADO]"