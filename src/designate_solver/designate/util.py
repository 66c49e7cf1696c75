"""Record-name and TXT value helpers."""

from __future__ import annotations


def absolute_name(name: str) -> str:
    """Return ``name`` as an absolute DNS name with a single trailing dot.

    Designate stores record-set names fully qualified, e.g.
    ``_acme-challenge.example.com.``.
    """
    name = name.strip()
    if not name:
        raise ValueError("Record name must not be empty")
    return name.rstrip(".") + "."


def same_name(a: str, b: str) -> bool:
    """Compare two DNS names ignoring case and the trailing dot."""
    return a.rstrip(".").lower() == b.rstrip(".").lower()


def unquote_txt(value: str) -> str:
    """Strip one pair of surrounding double quotes from TXT record data.

    Designate may hand TXT values back quoted (``"token"``) even when they were
    submitted bare.
    """
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
