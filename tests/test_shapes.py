import datetime

import pytest
from bson import ObjectId
from bson.son import SON
from pyrsistent import pmap, pset, pvector

from persistent_doc.codec.shapes import NodeKind, classify
from persistent_doc.keywords import Keyword


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (Keyword.intern("k"), NodeKind.KEYWORD),
        (pmap({"a": 1}), NodeKind.MAPPING),
        ({"a": 1}, NodeKind.MAPPING),
        (SON([("a", 1)]), NodeKind.MAPPING),
        (pvector([1, 2]), NodeKind.SEQUENCE),
        ([1, 2], NodeKind.SEQUENCE),
        ((1, 2), NodeKind.SEQUENCE),
        ("text", NodeKind.SCALAR),
        (b"bytes", NodeKind.SCALAR),
        (bytearray(b"bytes"), NodeKind.SCALAR),
        (memoryview(b"bytes"), NodeKind.SCALAR),
        (None, NodeKind.SCALAR),
        (True, NodeKind.SCALAR),
        (3, NodeKind.SCALAR),
        (2.5, NodeKind.SCALAR),
        (ObjectId(), NodeKind.SCALAR),
        (datetime.datetime(2024, 1, 1, tzinfo=datetime.UTC), NodeKind.SCALAR),
    ],
)
def test_classify_recognised_shapes(value: object, kind: NodeKind) -> None:
    assert classify(value) is kind


def test_classify_unrecognised_containers_as_scalar() -> None:
    assert classify(frozenset({1})) is NodeKind.SCALAR
    assert classify({1, 2}) is NodeKind.SCALAR
    assert classify(pset([1])) is NodeKind.SCALAR
    assert classify(object()) is NodeKind.SCALAR
