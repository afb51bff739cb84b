import math

import pytest

from keyterms.collocations import COLUMNS, detect, top_pairs
from keyterms.errors import InvalidThreshold


def test_pair_at_threshold_is_kept():
    corpus = [["george", "washington", "spoke"]] * 30
    colls = detect(corpus, min_count=25)
    assert ("george", "washington") in set(zip(colls["term1"], colls["term2"]))
    row = colls[colls["collocation"] == "george washington"].iloc[0]
    assert row["count"] == 30


def test_pair_below_threshold_is_excluded():
    corpus = [["george", "washington", "spoke"]] * 24
    colls = detect(corpus, min_count=25)
    assert colls.empty
    assert list(colls.columns) == COLUMNS


def test_never_returns_pair_below_min_count():
    corpus = [["a", "b", "c", "a", "b"], ["c", "a", "b", "d"], ["d", "c"]]
    colls = detect(corpus, min_count=2)
    assert (colls["count"] >= 2).all()
    assert set(colls["collocation"]) == {"a b", "c a"}


def test_padding_and_document_boundaries_break_pairs():
    corpus = [["united", "", "states"], ["nation"], ["states", "nation"]]
    colls = detect(corpus, min_count=1)
    assert list(colls["collocation"]) == ["states nation"]


def test_literal_repetition_is_a_candidate():
    colls = detect([["very", "very", "very"]], min_count=2)
    assert list(colls["collocation"]) == ["very very"]
    assert colls.loc[0, "count"] == 2


def test_g2_marginals_and_tie_order():
    corpus = [["c", "d"]] * 3 + [["a", "b"]] * 3
    colls = detect(corpus, min_count=1)
    assert list(colls["collocation"]) == ["a b", "c d"]
    first = colls.iloc[0]
    assert first["count_term1"] == 3
    assert first["count_term2"] == 3
    assert first["expected"] == pytest.approx(1.5)
    assert first["G2"] == pytest.approx(12 * math.log(2))
    assert colls.iloc[1]["G2"] == pytest.approx(first["G2"])


def test_ranked_by_g2_descending():
    corpus = [["new", "york", "city"], ["new", "deal"], ["new", "york"], ["york", "city"], ["old", "city"]] * 3
    colls = detect(corpus, min_count=1)
    assert list(colls["G2"]) == sorted(colls["G2"], reverse=True)
    assert (colls["G2"] >= -1e-9).all()


def test_empty_corpus():
    assert detect([], min_count=1).empty
    assert detect([[""], ["solo"]], min_count=1).empty


@pytest.mark.parametrize("bad", [0, -3, 2.5, True])
def test_invalid_min_count(bad):
    with pytest.raises(InvalidThreshold):
        detect([["a", "b"]], min_count=bad)


def test_top_pairs():
    corpus = [["c", "d"]] * 3 + [["a", "b"]] * 3
    colls = detect(corpus, min_count=1)
    assert top_pairs(colls, 1) == [("a", "b")]
    assert top_pairs(colls, 10) == [("a", "b"), ("c", "d")]
    with pytest.raises(InvalidThreshold):
        top_pairs(colls, -1)
