"""
metrics.py

Statistical checks for sampler output.

What this module does

- Builds histograms over integer outcomes.
- Runs a Chi-square test against the uniform distribution.
- Measures bit-frequency bias (how often 0 vs 1 appear).

Design choices

- "Uniform" means: over all outcomes in the sample space you specify.
- Outcomes outside the sample space are ignored by the histogram, and
  therefore show up as missing mass in the Chi-square test.

Quick start

>>> from passgen.metrics import chi_square_uniform, bit_frequency
>>> counts = {0: 102, 1: 98}                   # example
>>> chi_square_uniform(counts, support_size=2)
ChiSquareResult(stat=0.08, df=1, pvalue=0.77..., expected=[100.0, 100.0])

>>> bit_frequency([0, 1, 1, 0, 1])
BitFreq(total_bits=5, ones=3, zeros=2, frac_one=0.6, frac_zero=0.4)

Dependencies

- numpy
- scipy (for chi-square p-values)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping
import numpy as np
from scipy.stats import chisquare


#Helpers: counts

def counts_to_vector(
    counts: Mapping[int, int],
    support_size: int,
) -> np.ndarray:
    """
    Convert integer-keyed counts {k: c} into a length-`support_size` vector
    ordered by index (0..support_size-1). Missing entries are treated as 0.
    """
    v = np.zeros(support_size, dtype=float)
    for k, c in counts.items():
        if 0 <= k < support_size:
            v[k] = float(c)
    return v


def outcome_histogram(
    outcomes: Iterable[int],
    support_size: int,
) -> Dict[int, int]:
    """
    Make a histogram over integer outcomes in [0, support_size).

    Any outcome outside this range is ignored.
    """
    hist: Dict[int, int] = {}
    for x in outcomes:
        if 0 <= x < support_size:
            hist[x] = hist.get(x, 0) + 1
    return hist


#Bit-frequency stats

@dataclass
class BitFreq:
    total_bits: int
    ones: int
    zeros: int
    frac_one: float
    frac_zero: float


def bit_frequency(bits: Iterable[int]) -> BitFreq:
    """
    Count 0/1 frequency across a sequence of bits.

    Returns BitFreq with totals and fractions.
    """
    arr = np.fromiter(bits, dtype=np.int64)
    if arr.size == 0:
        raise ValueError("No bits found.")
    if np.any((arr != 0) & (arr != 1)):
        raise ValueError("bits must be 0 or 1")
    ones = int(arr.sum())
    total = int(arr.size)
    zeros = total - ones
    return BitFreq(
        total_bits=total,
        ones=ones,
        zeros=zeros,
        frac_one=ones / total,
        frac_zero=zeros / total,
    )


#Chi-square uniformity test

@dataclass
class ChiSquareResult:
    stat: float
    df: int
    pvalue: float
    expected: List[float]


def chi_square_uniform(
    counts: Mapping[int, int],
    support_size: int,
) -> ChiSquareResult:
    """
    Chi-square goodness-of-fit against a uniform distribution.

    Parameters
    ----------
    counts : Mapping
        Outcome -> frequency (int).
    support_size : int
        Total number of categories to test against.

    Returns

    ChiSquareResult(stat, df, pvalue, expected)

    Notes

    - df = (support_size - 1)
    """
    if support_size < 2:
        raise ValueError("support_size must be >= 2 for a Chi-square test")

    observed = counts_to_vector(counts, support_size)
    total = observed.sum()
    if total <= 0:
        raise ValueError("Empty counts supplied.")

    expected = np.ones(support_size, dtype=float) * (total / support_size)
    res = chisquare(f_obs=observed, f_exp=expected)

    return ChiSquareResult(
        stat=float(res.statistic),
        df=support_size - 1,
        pvalue=float(res.pvalue),
        expected=expected.tolist(),
    )


__all__ = [
    "BitFreq",
    "ChiSquareResult",
    "bit_frequency",
    "chi_square_uniform",
    "counts_to_vector",
    "outcome_histogram",
]
