"""
Validation helpers shared by the schema models.
"""
from typing import Optional


def require_text(v: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and reject blank strings. None passes through."""
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v
