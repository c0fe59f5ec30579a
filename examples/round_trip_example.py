"""Minimal example converting a persistent map to a BSON document and back."""

import bson
from pyrsistent import pmap, pvector

from persistent_doc import Keyword, PersistentDocument


def main() -> None:
    """Import a persistent map, encode it as BSON, then export it again."""
    k = Keyword.intern
    person = pmap({k("name"): "Ann", k("tags"): pvector(["a", "b"]), k("addr"): pmap({k("city"): "NY"})})

    document = PersistentDocument.from_persistent(person)
    print(f"{document=}")

    data = bson.encode(document)
    print("bson bytes:", len(data))

    restored = PersistentDocument(bson.decode(data)).to_persistent()
    print(f"{restored=}")
    print("round trip equal:", restored == person)


if __name__ == "__main__":
    main()
