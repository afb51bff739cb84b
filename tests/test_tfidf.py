import math

import numpy as np
import pytest

from keyterms import tfidf
from keyterms.counts import build_dtm

CORPUS = [
    ["united", "states", "united"],
    ["united", "nation"],
    ["united", "people", "states"],
]


def _col(dtm, term):
    return int(np.flatnonzero(dtm.terms == term)[0])


def test_idf_is_log2_of_inverse_document_share():
    values = tfidf.idf(build_dtm(CORPUS))
    assert values["united"] == 0
    assert values["states"] == pytest.approx(math.log2(3 / 2))
    assert values["nation"] == pytest.approx(math.log2(3))


def test_term_in_every_document_scores_zero():
    dtm = build_dtm(CORPUS)
    weights = tfidf.score(dtm)
    assert weights.shape == dtm.matrix.shape
    assert (weights[:, _col(dtm, "united")].toarray() == 0).all()


def test_weights_are_raw_count_times_idf():
    dtm = build_dtm(CORPUS + [["states", "states", "states"]])
    weights = tfidf.score(dtm).toarray()
    assert weights[3, _col(dtm, "states")] == pytest.approx(3 * math.log2(4 / 3))
    assert weights[1, _col(dtm, "nation")] == pytest.approx(2.0)


def test_score_document():
    scores = tfidf.score_document(build_dtm(CORPUS), 0)
    assert set(scores.index) == {"united", "states"}
    assert scores["united"] == 0
    assert scores["states"] == pytest.approx(math.log2(1.5))


def test_score_subset_uses_corpus_wide_idf():
    scores = tfidf.score_subset(build_dtm(CORPUS), [0, 2])
    assert "nation" not in scores.index
    assert scores["states"] == pytest.approx(2 * math.log2(1.5))
    assert scores["people"] == pytest.approx(math.log2(3))
