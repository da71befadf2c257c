"""Singleton pattern: eager, lazy double-checked and run-once variants."""

from __future__ import annotations

import threading
from typing import ClassVar


def _forbid_direct_construction(cls: type) -> None:
    raise TypeError(f"{cls.__name__} cannot be instantiated; use get_instance()")


class EagerSingleton:
    """Instance created when the class is defined; get_instance just returns it."""

    _instance: ClassVar[EagerSingleton]

    def __new__(cls, *args, **kwargs):
        _forbid_direct_construction(cls)

    @classmethod
    def get_instance(cls) -> EagerSingleton:
        return cls._instance


EagerSingleton._instance = object.__new__(EagerSingleton)


class LazySingleton:
    """Instance created on first use, guarded by double-checked locking."""

    _instance: ClassVar[LazySingleton | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls, *args, **kwargs):
        _forbid_direct_construction(cls)

    @classmethod
    def get_instance(cls) -> LazySingleton:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = object.__new__(cls)
                    print("Construct Class Singleton!!!")
                    cls._instance = instance
        return cls._instance


class OnceSingleton:
    """Instance created exactly once, with every call going through one lock."""

    _instance: ClassVar[OnceSingleton | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls, *args, **kwargs):
        _forbid_direct_construction(cls)

    @classmethod
    def get_instance(cls) -> OnceSingleton:
        with cls._lock:
            if cls._instance is None:
                instance = object.__new__(cls)
                print("Construct Class Singleton!!!")
                cls._instance = instance
            return cls._instance


def main(argv: list[str] | None = None) -> int:
    """Show that two lookups yield the same eager instance."""
    first = EagerSingleton.get_instance()
    second = EagerSingleton.get_instance()
    print(f"p1: {id(first):#x}")
    print(f"p2: {id(second):#x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())