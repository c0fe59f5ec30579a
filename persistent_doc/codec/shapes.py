"""Runtime shape classification shared by both transcoders."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from typing import Any

from persistent_doc.keywords import Keyword


_ATOMIC_SEQUENCES = (str, bytes, bytearray, memoryview)


class NodeKind(enum.Enum):
    """Closed set of shapes a tree node can take."""

    KEYWORD = "keyword"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: Any) -> NodeKind:
    """Return the shape of ``value``.

    Text and binary are scalars even though they are sequences. Anything
    unrecognised is a scalar and is passed through unchanged.
    """
    if isinstance(value, Keyword):
        return NodeKind.KEYWORD
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, _ATOMIC_SEQUENCES):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR
