"""Id factories for elements and tags.

The parser only needs "give me a fresh id" and compares ids for equality, so an
id factory is any zero-argument callable returning a ``str``.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Callable

from .. import config

IdFactory = Callable[[], str]


def uuid4_ids() -> IdFactory:
    return lambda: str(uuid.uuid4())


def counter_ids(prefix: str = "id") -> IdFactory:
    """Deterministic ids: ``id-1``, ``id-2``, ... Useful for fixtures and diffs."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


_STRATEGIES: dict[str, Callable[[], IdFactory]] = {
    "uuid4": uuid4_ids,
    "counter": counter_ids,
}


def make_id_factory(strategy: str | None = None) -> IdFactory:
    """Build a fresh factory for one parse call from a strategy name (default: config)."""
    name = (strategy or config.ID_STRATEGY).strip().lower()
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown id strategy {name!r}; expected one of {sorted(_STRATEGIES)}"
        ) from None
