"""URL slug helpers."""

import re
import unicodedata

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """Return a URL-safe slug for ``name``.

    Lowercases, strips diacritics, collapses every run of non-alphanumeric
    characters into a single hyphen and trims hyphens at both ends:

    >>> generate_slug("Categoría Épica!!")
    'categoria-epica'
    """
    decomposed = unicodedata.normalize("NFD", (name or "").lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM_RUN.sub("-", stripped).strip("-")
