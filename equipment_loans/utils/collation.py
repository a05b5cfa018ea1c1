import unicodedata
from typing import Tuple

def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))

def collation_key(text: str) -> Tuple[str, str, str]:
    """Sort key approximating locale-aware comparison.

    Primary level ignores accents and case ("Amélie" sorts with "Amelie",
    before "Bruno"); accents and then case only break ties.
    """
    return (
        _strip_accents(text).casefold(),
        unicodedata.normalize("NFKD", text).casefold(),
        text,
    )
