"""Persistent structure to mutable document conversion."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, assert_never

from persistent_doc.keywords import key_to_text

from .shapes import NodeKind, classify


logger = logging.getLogger(__name__)

DocumentFactory = Callable[[], MutableMapping[str, Any]]


def _default_document_class() -> DocumentFactory:
    from persistent_doc.documents import PersistentDocument  # noqa: PLC0415

    return PersistentDocument


def put_entries(target: MutableMapping[str, Any], mapping: Mapping[Any, Any], document_class: DocumentFactory) -> None:
    """Import every entry of ``mapping`` into ``target``.

    Keys that normalise to the same text collide; the entry seen last in
    iteration order wins.
    """
    seen: set[str] = set()
    for key, value in mapping.items():
        text_key = key_to_text(key)
        if text_key in seen:
            logger.debug("key collision on %r, keeping last value", text_key)
        seen.add(text_key)
        target[text_key] = import_value(value, document_class=document_class)


def import_value(value: Any, *, document_class: DocumentFactory | None = None) -> Any:
    """Convert one persistent value into its document form."""
    factory = document_class if document_class is not None else _default_document_class()
    kind = classify(value)
    match kind:
        case NodeKind.KEYWORD:
            return value.name
        case NodeKind.MAPPING:
            document = factory()
            put_entries(document, value, factory)
            return document
        case NodeKind.SEQUENCE:
            return [import_value(item, document_class=factory) for item in value]
        case NodeKind.SCALAR:
            return value
        case _:
            assert_never(kind)


def import_document(mapping: Mapping[Any, Any], *, document_class: DocumentFactory | None = None) -> Any:
    """Convert a persistent mapping into a new mutable document."""
    if not isinstance(mapping, Mapping):
        msg = f"expected a mapping, got {type(mapping).__name__}"
        raise TypeError(msg)
    return import_value(mapping, document_class=document_class)
