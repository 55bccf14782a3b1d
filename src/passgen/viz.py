"""
viz.py: Matplotlib helpers for sampler audit figures

Aim:
- Small, dependency-light (matplotlib only).
- Return (fig, ax) so callers can further customize or save.
- Accept plain dicts/arrays from `metrics.py` and `audit.py`.


Quick start

>>> from passgen.viz import plot_counts_histogram, save_audit_figure
>>> fig, ax = plot_counts_histogram({0: 120, 1: 130, 2: 121, 3: 129}, title="counts")

>>> from passgen.audit import audit_sampler
>>> save_audit_figure(audit_sampler(n=10), "audit.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple, Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from .audit import AuditReport


#Basic helpers

def _autox_labels(ax, labels: Sequence[str]) -> None:
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=0)


#Plots

def plot_counts_histogram(
    counts: Mapping[int, int],
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Bar chart of outcome counts, ordered by outcome.
    """
    keys = sorted(counts)
    labels = [str(k) for k in keys]
    vals = [int(counts[k]) for k in keys]

    fig, ax = plt.subplots()
    ax.bar(range(len(vals)), vals)
    _autox_labels(ax, labels)
    ax.set_ylabel("Counts")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def save_audit_figure(report: AuditReport, path: Union[str, Path]) -> Path:
    """
    Write the audit histogram and its residuals side by side to `path`.
    """
    observed = [report.counts.get(i, 0) for i in range(report.n)]

    fig, (ax_counts, ax_resid) = plt.subplots(1, 2, figsize=(10, 4))
    try:
        ax_counts.bar(range(report.n), observed)
        _autox_labels(ax_counts, [str(i) for i in range(report.n)])
        ax_counts.axhline(report.chi_square.expected[0], linestyle="--")
        ax_counts.set_ylabel("Counts")
        ax_counts.set_title(f"{report.trials} draws in [0, {report.n})")

        resid = np.asarray(observed, dtype=float) - np.asarray(report.chi_square.expected)
        ax_resid.bar(range(report.n), resid)
        _autox_labels(ax_resid, [str(i) for i in range(report.n)])
        ax_resid.axhline(0.0)
        ax_resid.set_title(f"chi2 = {report.chi_square.stat:.2f}, p = {report.chi_square.pvalue:.3f}")

        fig.tight_layout()
        out = Path(path).expanduser()
        fig.savefig(out)
    finally:
        plt.close(fig)
    return out


__all__ = [
    "plot_counts_histogram",
    "save_audit_figure",
]
