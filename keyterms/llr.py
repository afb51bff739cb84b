"""Signed log-likelihood keyness of a target against a comparison corpus.

For each term with target count a and comparison count b (c and d the
totals)::

    E1 = c (a + b) / (c + d)        E2 = d (a + b) / (c + d)
    G2 = 2 (a ln(a / E1) + b ln(b / E2))

A zero count makes its log argument 1, so the term contributes nothing.
This is not the calculus limit of x ln x; it only agrees with it because
the multiplier is zero as well. G2 is negated where the term is relatively
rarer in the target than in the comparison, so sorting descending gives
over-use and ascending gives under-use. |G2| is read against chi-square
with one degree of freedom.

Both corpora must be tokenized, lemmatized and stopword-filtered the same
way; this is not checked.
"""
import numpy as np
import pandas as pd
from scipy.stats import chi2

from keyterms.errors import EmptyVocabulary, InvalidThreshold

# p-value -> chi-square(1) critical value
SIGNIFICANCE_THRESHOLDS = {
    0.05: 3.84,
    0.01: 6.63,
    0.001: 10.83,
    0.0001: 15.13,
}


def _as_counts(counts, side):
    s = counts.astype(float) if isinstance(counts, pd.Series) else pd.Series(dict(counts), dtype=float)
    if (s < 0).any():
        raise ValueError(f"{side} term counts must be non-negative")
    return s


def log_likelihood(target_counts, comparison_counts) -> pd.Series:
    """Term -> signed LLR for every term of `target_counts`.

    Terms missing from the comparison are scored with a comparison count of 0.
    Raises EmptyVocabulary when either side sums to zero.
    """
    target = _as_counts(target_counts, "target")
    comparison = _as_counts(comparison_counts, "comparison")

    c = target.sum()
    if not c > 0:
        raise EmptyVocabulary("target")
    missing = target.index.difference(comparison.index)
    comparison = pd.concat([comparison, pd.Series(0.0, index=missing)])
    d = comparison.sum()
    if not d > 0:
        raise EmptyVocabulary("comparison")

    a = target.to_numpy()
    b = comparison.reindex(target.index).to_numpy()

    e1 = c * (a + b) / (c + d)
    e2 = d * (a + b) / (c + d)
    with np.errstate(divide="ignore", invalid="ignore"):
        t1 = a * np.log(np.where(a == 0, 1.0, a / e1))
        t2 = b * np.log(np.where(b == 0, 1.0, b / e2))
    llr = 2 * (t1 + t2)

    rel_a = a / c
    rel_b = b / d
    llr = np.where(rel_a < rel_b, -llr, llr)
    return pd.Series(llr, index=target.index, name="llr")


def significant(scores, p=0.01) -> pd.Series:
    """Scores whose magnitude exceeds the critical value for `p`."""
    if p not in SIGNIFICANCE_THRESHOLDS:
        raise InvalidThreshold(f"p must be one of {sorted(SIGNIFICANCE_THRESHOLDS)}, got {p}")
    return scores[scores.abs() > SIGNIFICANCE_THRESHOLDS[p]]


def p_values(scores) -> pd.Series:
    return pd.Series(chi2.sf(np.abs(scores.to_numpy(dtype=float)), df=1), index=scores.index, name="p_value")
