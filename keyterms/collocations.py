"""Adjacent-pair collocation detection.

Every pair of neighbouring tokens inside one document is a candidate.
Pairs touching a padding token are skipped, since the padding stands for a
removed stopword. Candidates below ``min_count`` are dropped before scoring;
the rest are ranked by Dunning's log-likelihood (G2) over the 2x2 table

                 term2        not term2
    term1        a            c1 - a
    not term1    c2 - a       n - c1 - c2 + a

where c1 / c2 count term1 in first / term2 in second position and n is the
number of valid pair positions.
"""
import logging

import numpy as np
import pandas as pd
from nltk import bigrams
from scipy.special import xlogy

from keyterms.config import PADDING, TOP_COLLOCATIONS
from keyterms.errors import InvalidThreshold

logger = logging.getLogger(__name__)

COLUMNS = ["collocation", "term1", "term2", "count", "count_term1", "count_term2", "expected", "G2"]


def _check_threshold(min_count):
    if isinstance(min_count, bool) or not isinstance(min_count, (int, np.integer)):
        raise InvalidThreshold(f"min_count must be a positive integer, got {min_count!r}")
    if min_count <= 0:
        raise InvalidThreshold(f"min_count must be a positive integer, got {min_count}")


def adjacent_pairs(corpus) -> pd.DataFrame:
    left, right = [], []
    for doc in corpus:
        for t1, t2 in bigrams(doc):
            if t1 == PADDING or t2 == PADDING:
                continue
            left.append(t1)
            right.append(t2)
    return pd.DataFrame({"term1": left, "term2": right}, dtype=object)


def _g2(a, c1, c2, n):
    observed = [a, c1 - a, c2 - a, n - c1 - c2 + a]
    expected = [
        c1 * c2 / n,
        c1 * (n - c2) / n,
        (n - c1) * c2 / n,
        (n - c1) * (n - c2) / n,
    ]
    total = np.zeros_like(a)
    with np.errstate(divide="ignore", invalid="ignore"):
        for o, e in zip(observed, expected):
            ratio = np.where(e > 0, o / e, 1.0)
            total += xlogy(o, ratio)
    return 2.0 * total


def detect(corpus, min_count=2) -> pd.DataFrame:
    """Rank adjacent token pairs occurring at least `min_count` times."""
    _check_threshold(min_count)
    pairs = adjacent_pairs(corpus)
    n = len(pairs)
    if n == 0:
        return pd.DataFrame(columns=COLUMNS)

    joint = pairs.groupby(["term1", "term2"], sort=False).size().reset_index(name="count")
    joint["count_term1"] = joint["term1"].map(pairs["term1"].value_counts())
    joint["count_term2"] = joint["term2"].map(pairs["term2"].value_counts())
    joint = joint[joint["count"] >= min_count].copy()
    if joint.empty:
        logger.info("No pair reaches min_count=%d among %d pair positions", min_count, n)
        return pd.DataFrame(columns=COLUMNS)

    a = joint["count"].to_numpy(dtype=float)
    c1 = joint["count_term1"].to_numpy(dtype=float)
    c2 = joint["count_term2"].to_numpy(dtype=float)
    joint["expected"] = c1 * c2 / n
    joint["G2"] = _g2(a, c1, c2, float(n))
    joint["collocation"] = joint["term1"] + " " + joint["term2"]

    joint = joint.sort_values(["G2", "term1", "term2"], ascending=[False, True, True], kind="mergesort")
    logger.info("Scored %d collocation candidates (min_count=%d)", len(joint), min_count)
    return joint[COLUMNS].reset_index(drop=True)


def top_pairs(collocations, k=TOP_COLLOCATIONS):
    """First `k` ranked candidates as (term1, term2) tuples."""
    if k < 0:
        raise InvalidThreshold(f"k must be non-negative, got {k}")
    head = collocations.head(k)
    return list(zip(head["term1"], head["term2"]))
