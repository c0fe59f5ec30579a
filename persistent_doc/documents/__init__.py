"""Driver-native document types."""

from .document import PersistentDocument


__all__ = ["PersistentDocument"]
