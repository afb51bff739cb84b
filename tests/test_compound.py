from keyterms.collocations import detect
from keyterms.compound import compound
from keyterms.tokens import remove_padding


def test_merges_accepted_pairs():
    corpus = [["george", "washington", "was", "first"], ["washington", "george"]]
    result = compound(corpus, [("george", "washington")])
    assert result == [["george_washington", "was", "first"], ["washington", "george"]]


def test_left_to_right_first_match():
    result = compound([["a", "b", "c"]], [("a", "b"), ("b", "c")])
    assert result == [["a_b", "c"]]


def test_custom_separator():
    assert compound([["health", "care"]], [("health", "care")], separator="-") == [["health-care"]]


def test_no_candidates_only_removes_padding():
    corpus = [["united", "", "states"], ["", "nation"]]
    assert compound(corpus, []) == remove_padding(corpus)


def test_padding_kept_when_not_cleaning():
    corpus = [["united", "", "states"]]
    assert compound(corpus, [], clean=False) == corpus


def test_padding_never_bridges_a_pair():
    result = compound([["united", "", "states"]], [("united", "states")])
    assert result == [["united", "states"]]


def test_idempotent():
    pairs = [("george", "washington"), ("health", "care")]
    corpus = [["george", "george", "washington", "health", "care", "care"]]
    once = compound(corpus, pairs)
    assert once == [["george", "george_washington", "health_care", "care"]]
    assert compound(once, pairs) == once


def test_accepts_collocation_frame_and_leaves_input_alone():
    corpus = [["health", "care", "", "reform"]] * 3
    snapshot = [list(doc) for doc in corpus]
    colls = detect(corpus, min_count=3)
    result = compound(corpus, colls)
    assert result == [["health_care", "reform"]] * 3
    assert corpus == snapshot


def test_accepts_a_generator_of_documents():
    docs = (doc for doc in [["george", "washington"], ["health", "care", ""]])
    result = compound(docs, [("george", "washington"), ("health", "care")])
    assert result == [["george_washington"], ["health_care"]]
