"""Keyword tokens and key normalisation."""

from .keys import key_to_text, text_to_key
from .keyword import Keyword


__all__ = ["Keyword", "key_to_text", "text_to_key"]
