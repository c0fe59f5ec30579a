"""persistent-doc - codec between persistent nested maps and BSON documents"""

from ._version import version as __version__
from .codec import export_document, export_plain, import_document
from .documents import PersistentDocument
from .keywords import Keyword


__all__ = [
    "Keyword",
    "PersistentDocument",
    "__version__",
    "export_document",
    "export_plain",
    "import_document",
]
