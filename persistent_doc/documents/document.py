"""Ordered BSON document that converts to and from persistent maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from bson.son import SON

from persistent_doc.codec.exporter import export_document
from persistent_doc.codec.importer import put_entries


if TYPE_CHECKING:
    from pyrsistent import PMap


class PersistentDocument(SON[str, Any]):
    """``SON`` document populated from, and exported to, persistent maps.

    Nested maps are imported as ``PersistentDocument`` instances and
    nested sequences as plain lists, so the driver can encode the result
    directly.
    """

    @classmethod
    def from_persistent(cls, mapping: Mapping[Any, Any]) -> PersistentDocument:
        """Build a new document from a persistent mapping."""
        document = cls()
        document.put_persistent(mapping)
        return document

    def put_persistent(self, mapping: Mapping[Any, Any]) -> None:
        """Import every entry of ``mapping`` into this document.

        Existing keys are overwritten in place; new keys are appended.
        """
        if not isinstance(mapping, Mapping):
            msg = f"expected a mapping, got {type(mapping).__name__}"
            raise TypeError(msg)
        put_entries(self, mapping, type(self))

    def to_persistent(self, keywordize: bool = True) -> PMap[Any, Any]:
        """Export this document as a persistent map."""
        return export_document(self, keywordize)

    @staticmethod
    def to_persistent_map(mapping: Mapping[Any, Any], keywordize: bool) -> PMap[Any, Any]:
        """Export any mapping as a persistent map."""
        return export_document(mapping, keywordize)
