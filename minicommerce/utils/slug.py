# minicommerce/utils/slug.py
import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str | None) -> str:
    """URL-friendly slug: "Électronique & Co" -> "electronique-co"."""
    if text is None:
        return ""

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    dashed = _NON_ALNUM.sub("-", stripped.lower().strip())
    return dashed.strip("-")
