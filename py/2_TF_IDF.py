from keyterms.config import GROUP_COLUMN, RESULT_FILE, SPEECHES_CSV
from keyterms.corpus import load_result, load_speeches
from keyterms.counts import build_dtm, top_terms
from keyterms.config import configure_logging
from keyterms import tfidf

DOC_INDEX = 0
GROUP = "Barack Obama"
TOP_N = 20


def main():
    configure_logging()
    df = load_speeches(SPEECHES_CSV)
    result = load_result(RESULT_FILE)
    if len(df) != len(result.corpus):
        raise ValueError(f"Row mismatch: csv={len(df)} vs corpus={len(result.corpus)}")

    dtm = build_dtm(result.corpus)
    print(f"✓ DTM: {dtm.n_docs} documents x {dtm.n_terms} terms")

    doc_scores = tfidf.score_document(dtm, DOC_INDEX)
    print(f"\n-- Top {TOP_N} TF-IDF terms of document {DOC_INDEX} --")
    for term, weight in top_terms(doc_scores, TOP_N).items():
        print(f"{term:25} {weight:.2f}")

    rows = (df[GROUP_COLUMN] == GROUP).to_numpy()
    if not rows.any():
        print(f"\n[no documents for {GROUP}]")
        return
    group_scores = tfidf.score_subset(dtm, rows)
    print(f"\n-- Top {TOP_N} TF-IDF terms of {GROUP} ({rows.sum()} documents) --")
    for term, weight in top_terms(group_scores, TOP_N).items():
        print(f"{term:25} {weight:.2f}")


if __name__ == "__main__":
    main()
