"""
Ready pool factory: maps pool kinds to pool classes.

One place knows how to build every ready pool structure. The engine asks
for a fresh pool at the start of each simulation run.
"""

from typing import Union

from models.enums import ReadyPoolKind
from scheduler.base import AbstractReadyPool
from scheduler.indexed_pool import IndexedReadyPool
from scheduler.linear_pool import LinearReadyPool


_REGISTRY: dict[ReadyPoolKind, type[AbstractReadyPool]] = {
    ReadyPoolKind.INDEXED: IndexedReadyPool,
    ReadyPoolKind.LINEAR: LinearReadyPool,
}


def create_ready_pool(kind: Union[ReadyPoolKind, str]) -> AbstractReadyPool:
    """
    Create an empty ready pool of the given kind.

    Accepts the enum or its string value ("indexed", "linear").
    Raises ValueError for anything else.
    """
    try:
        kind = ReadyPoolKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown ready pool: '{kind}'. Available: {[k.value for k in _REGISTRY]}"
        ) from None
    return _REGISTRY[kind]()
