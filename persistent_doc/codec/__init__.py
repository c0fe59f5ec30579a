"""Structural codec between persistent trees and mutable documents."""

from .exporter import export_document, export_plain, export_value
from .importer import import_document, import_value
from .shapes import NodeKind, classify


__all__ = ["NodeKind", "classify", "export_document", "export_plain", "export_value", "import_document", "import_value"]
