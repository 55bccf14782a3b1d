"""
audit.py

Self-check of the sampler: draw many indices, then test that they look
uniform and that the raw bits are balanced.

Quick start

>>> from passgen.audit import audit_sampler
>>> report = audit_sampler(n=10, trials=100_000)
>>> report.passed
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import logging

from scipy.stats import binomtest

from . import sampler
from .errors import InvalidCount, PassgenError
from .metrics import BitFreq, ChiSquareResult, bit_frequency, chi_square_uniform, outcome_histogram

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 0.001
DEFAULT_BIT_SAMPLE = 8192


@dataclass
class AuditReport:
    n: int
    trials: int
    counts: Dict[int, int]
    chi_square: ChiSquareResult
    bits: BitFreq
    bits_pvalue: float
    alpha: float = DEFAULT_ALPHA

    @property
    def passed(self) -> bool:
        return self.chi_square.pvalue >= self.alpha and self.bits_pvalue >= self.alpha


def audit_sampler(
    n: int = 10,
    trials: int = 100_000,
    pool: Optional[sampler.BitPool] = None,
    alpha: float = DEFAULT_ALPHA,
    bit_sample: int = DEFAULT_BIT_SAMPLE,
) -> AuditReport:
    """
    Draw `trials` indices in [0, n) and `bit_sample` raw bits from `pool`.

    The index histogram is tested with Chi-square against uniform, the bits
    with an exact binomial test against p = 0.5. Both must reach `alpha`
    for the report to pass.
    """
    if n < 2:
        raise PassgenError(f"audit range must be >= 2 (got {n})")
    if trials < 1:
        raise InvalidCount(trials)
    if pool is None:
        pool = sampler.default_pool()

    draws = pool.uniform_ints(n, size=trials)
    counts = outcome_histogram(draws, n)
    chi = chi_square_uniform(counts, support_size=n)

    bf = bit_frequency(pool.get_bits(bit_sample))
    bits_p = float(binomtest(bf.ones, bf.total_bits, 0.5).pvalue)

    logger.info(
        "audit n=%d trials=%d chi2=%.3f p=%.4f bit-p=%.4f",
        n, trials, chi.stat, chi.pvalue, bits_p,
    )
    return AuditReport(
        n=n,
        trials=trials,
        counts=counts,
        chi_square=chi,
        bits=bf,
        bits_pvalue=bits_p,
        alpha=alpha,
    )


__all__ = ["AuditReport", "audit_sampler", "DEFAULT_ALPHA"]
