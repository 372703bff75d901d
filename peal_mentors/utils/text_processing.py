"""Term normalization and containment matching."""

from collections.abc import Iterable


def normalize_term(term: str | None) -> str:
    """Lower-case and strip a single term. None becomes an empty string."""
    if not term:
        return ""
    return str(term).strip().lower()


def normalize_terms(terms: Iterable[str] | None) -> list[str]:
    """Normalize a list of terms, dropping blanks and duplicates (first wins)."""
    if not terms:
        return []
    normalized = (normalize_term(t) for t in terms)
    return list(dict.fromkeys(t for t in normalized if t))


def contains_either(a: str, b: str) -> bool:
    """True if either string contains the other. Both must already be normalized."""
    if not a or not b:
        return False
    return a in b or b in a


def matching_terms(terms: list[str], tags: list[str]) -> list[str]:
    """Return the terms that contain, or are contained in, any of the tags."""
    return [term for term in terms if any(contains_either(term, tag) for tag in tags)]


def text_contains(text: str | None, query: str) -> bool:
    """Case-insensitive substring search; missing text never matches."""
    if text is None:
        return False
    return query.lower() in str(text).lower()
