"""
batch.py: run a generator several times and collect the results.

Each call to the generator draws fresh bits from the pool; nothing is
reset or replayed between items. The first failure propagates unchanged
and no partial batch is returned.
"""

from __future__ import annotations

from typing import Callable, List
import logging

from .errors import InvalidCount

logger = logging.getLogger(__name__)


def generate_n(n: int, generator_fn: Callable[[], str]) -> List[str]:
    """
    Call `generator_fn` `n` times and return the outputs in order.

    >>> generate_n(3, lambda: "x")
    ['x', 'x', 'x']
    """
    if n < 1:
        raise InvalidCount(n)
    out: List[str] = []
    for i in range(n):
        out.append(generator_fn())
        logger.debug("batch item %d/%d generated", i + 1, n)
    return out


__all__ = ["generate_n"]
