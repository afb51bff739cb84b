import logging
from dataclasses import dataclass, field

import pandas as pd
from joblib import Parallel, delayed

from keyterms.counts import DocumentTermMatrix
from keyterms.errors import KeyTermsError
from keyterms.llr import log_likelihood
from keyterms.tfidf import score_subset

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    scores: dict = field(default_factory=dict)
    errors: dict = field(default_factory=dict)


def _group_keys(groups, n_docs):
    groups = pd.Series(groups).reset_index(drop=True)
    if len(groups) != n_docs:
        raise ValueError(f"Expected {n_docs} group labels, got {len(groups)}")
    return groups, list(pd.unique(groups.dropna()))


def _score_group(key, target, comparison):
    try:
        return key, log_likelihood(target, comparison), None
    except KeyTermsError as e:
        return key, None, e


def group_keyness(dtm: DocumentTermMatrix, groups, n_jobs=1) -> BatchResult:
    """Signed LLR of each group's documents against all remaining documents.

    `groups` holds one label per matrix row (e.g. the president of each
    speech). A group that cannot be scored is reported in `errors`; the
    other groups are unaffected.
    """
    groups, keys = _group_keys(groups, dtm.n_docs)
    labelled = groups.notna().to_numpy()
    if not labelled.all():
        logger.warning("%d documents have no group label and are left out of every comparison", (~labelled).sum())
    total = dtm.term_counts(labelled)

    def jobs():
        for key in keys:
            mask = (groups == key).to_numpy()
            target = dtm.term_counts(mask)
            yield key, target, total - target

    if n_jobs == 1:
        outcomes = [_score_group(*job) for job in jobs()]
    else:
        outcomes = Parallel(n_jobs=n_jobs)(delayed(_score_group)(*job) for job in jobs())

    result = BatchResult()
    for key, scores, error in outcomes:
        if error is not None:
            logger.warning("Skipping %s: %s", key, error)
            result.errors[key] = error
        else:
            result.scores[key] = scores
    logger.info("Scored %d of %d groups", len(result.scores), len(keys))
    return result


def group_tfidf(dtm: DocumentTermMatrix, groups) -> dict:
    groups, keys = _group_keys(groups, dtm.n_docs)
    return {key: score_subset(dtm, (groups == key).to_numpy()) for key in keys}
