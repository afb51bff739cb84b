import logging

import pandas as pd

from keyterms.config import COMPOUND_SEPARATOR, PADDING
from keyterms.tokens import remove_padding

logger = logging.getLogger(__name__)


def _as_pairs(pairs):
    if isinstance(pairs, pd.DataFrame):
        return set(zip(pairs["term1"], pairs["term2"]))
    return {tuple(p) for p in pairs}


def compound_document(doc, accepted, separator=COMPOUND_SEPARATOR):
    out = []
    i = 0
    n = len(doc)
    while i < n:
        if i + 1 < n and (doc[i], doc[i + 1]) in accepted:
            out.append(doc[i] + separator + doc[i + 1])
            i += 2
        else:
            out.append(doc[i])
            i += 1
    return out


def compound(corpus, pairs, separator=COMPOUND_SEPARATOR, clean=True):
    """Merge accepted adjacent pairs into single tokens, scanning left to right.

    `pairs` is an iterable of (term1, term2) or a frame from
    :func:`keyterms.collocations.detect`. With `clean`, padding tokens are
    dropped afterwards.
    """
    corpus = list(corpus)
    accepted = {p for p in _as_pairs(pairs) if PADDING not in p}
    result = [compound_document(doc, accepted, separator) for doc in corpus]
    if accepted:
        merged = sum(len(d) for d in corpus) - sum(len(d) for d in result)
        logger.info("Compounded %d occurrences of %d multi-word units", merged, len(accepted))
    if clean:
        result = remove_padding(result)
    return result
