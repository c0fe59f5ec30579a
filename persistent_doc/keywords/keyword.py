"""Interned symbolic tokens used as persistent-map keys."""

from __future__ import annotations

import threading
import weakref
from typing import Any, override


class Keyword:
    """Interned, optionally namespaced label.

    Instances are only created through :meth:`Keyword.intern`, so two
    keywords with the same namespace and name are the same object and
    compare by identity.
    """

    __slots__ = ("__weakref__", "_name", "_namespace")

    _table: weakref.WeakValueDictionary[tuple[str | None, str], Keyword] = weakref.WeakValueDictionary()
    _table_lock = threading.Lock()

    _name: str
    _namespace: str | None

    def __new__(cls, *_args: Any, **_kwargs: Any) -> Keyword:
        msg = "use Keyword.intern() to create keywords"
        raise TypeError(msg)

    @classmethod
    def intern(cls, name: str, namespace: str | None = None) -> Keyword:
        """Return the unique keyword for ``namespace``/``name``."""
        if not isinstance(name, str):
            msg = f"keyword name must be str, not {type(name).__name__}"
            raise TypeError(msg)
        if namespace is not None and not isinstance(namespace, str):
            msg = f"keyword namespace must be str or None, not {type(namespace).__name__}"
            raise TypeError(msg)

        ident = (namespace, name)
        with cls._table_lock:
            existing = cls._table.get(ident)
            if existing is not None:
                return existing
            keyword = object.__new__(cls)
            object.__setattr__(keyword, "_name", name)
            object.__setattr__(keyword, "_namespace", namespace)
            cls._table[ident] = keyword
            return keyword

    @property
    def name(self) -> str:
        """Bare name, without namespace."""
        return self._name

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        msg = "Keyword is immutable"
        raise AttributeError(msg)

    @override
    def __delattr__(self, name: str) -> None:
        msg = "Keyword is immutable"
        raise AttributeError(msg)

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        return (Keyword.intern, (self._name, self._namespace))

    def __copy__(self) -> Keyword:
        return self

    def __deepcopy__(self, _memo: dict[int, Any]) -> Keyword:
        return self

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Keyword):
            return NotImplemented
        return (self._namespace or "", self._name) < (other._namespace or "", other._name)

    @override
    def __repr__(self) -> str:
        if self._namespace is None:
            return f":{self._name}"
        return f":{self._namespace}/{self._name}"

    @override
    def __str__(self) -> str:
        return repr(self)
