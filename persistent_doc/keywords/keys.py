"""Conversions between persistent-map keys and document keys."""

from __future__ import annotations

from typing import Any

from .keyword import Keyword


def key_to_text(key: Any) -> str:
    """Normalise a persistent-map key to a document key.

    Keywords lose their namespace and keep only their bare name.
    """
    if isinstance(key, Keyword):
        return key.name
    if isinstance(key, str):
        return key
    return str(key)


def text_to_key(text: Any, keywordize: bool) -> Any:
    """Convert a document key to a persistent-map key."""
    if not keywordize:
        return text
    if not isinstance(text, str):
        text = str(text)
    return Keyword.intern(text)
