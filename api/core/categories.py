"""
Closed set of content categories shared by articles and ads.
"""

from __future__ import annotations

CATEGORIES = frozenset(
    {
        "geral",
        "tecnologia",
        "politica",
        "economia",
        "empreendedorismo",
        "bolsas",
        "cursos",
        "carreira",
    }
)


def is_valid_category(value: str | None) -> bool:
    return value in CATEGORIES
