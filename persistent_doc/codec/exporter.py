"""Mutable document to persistent structure conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, assert_never

from pyrsistent import PMap, pmap, pvector

from persistent_doc.keywords import text_to_key

from .shapes import NodeKind, classify


logger = logging.getLogger(__name__)


def export_value(value: Any, keywordize: bool = True) -> Any:
    """Convert one document value into its persistent form."""
    kind = classify(value)
    match kind:
        case NodeKind.MAPPING:
            evolver = pmap().evolver()
            seen: set[Any] = set()
            for key, item in value.items():
                persistent_key = text_to_key(key, keywordize)
                if persistent_key in seen:
                    logger.debug("key collision on %r, keeping last value", persistent_key)
                seen.add(persistent_key)
                evolver[persistent_key] = export_value(item, keywordize)
            return evolver.persistent()
        case NodeKind.SEQUENCE:
            vector = pvector().evolver()
            for item in value:
                vector.append(export_value(item, keywordize))
            return vector.persistent()
        case NodeKind.KEYWORD | NodeKind.SCALAR:
            return value
        case _:
            assert_never(kind)


def export_document(document: Mapping[Any, Any], keywordize: bool = True) -> PMap[Any, Any]:
    """Convert a document (or any mapping) into a persistent map.

    With ``keywordize`` the text keys become :class:`Keyword` tokens.
    """
    if not isinstance(document, Mapping):
        msg = f"expected a mapping, got {type(document).__name__}"
        raise TypeError(msg)
    return export_value(document, keywordize)


def export_plain(document: Mapping[Any, Any]) -> PMap[Any, Any]:
    """Convert a document into a persistent map keeping text keys."""
    return export_document(document, keywordize=False)
