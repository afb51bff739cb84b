from collections import Counter
from dataclasses import dataclass

import numpy as np
import pandas as pd
from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import CountVectorizer

from keyterms.config import PADDING, TOP_N


def _without_padding(doc):
    return [tok for tok in doc if tok != PADDING]


@dataclass
class DocumentTermMatrix:
    """Raw term counts, documents as rows and `terms` as columns."""

    matrix: csr_matrix
    terms: np.ndarray

    @property
    def n_docs(self):
        return self.matrix.shape[0]

    @property
    def n_terms(self):
        return self.matrix.shape[1]

    def _rows(self, rows):
        if rows is None:
            return self.matrix
        rows = np.asarray(rows)
        if rows.dtype == bool:
            if len(rows) != self.n_docs:
                raise ValueError(f"Row mask has {len(rows)} entries for {self.n_docs} documents")
            rows = np.flatnonzero(rows)
        return self.matrix[rows.astype(int)]

    def term_counts(self, rows=None) -> pd.Series:
        """Counts summed over all documents, or over a row subset."""
        counts = self._rows(rows).sum(axis=0).A1
        return pd.Series(counts.astype(np.int64), index=self.terms, name="count")

    def document_counts(self, doc_index) -> pd.Series:
        row = self.matrix[doc_index]
        return pd.Series(row.data.astype(np.int64), index=self.terms[row.indices], name="count").sort_index()

    def document_frequency(self) -> pd.Series:
        df = np.bincount(self.matrix.indices, minlength=self.n_terms)
        return pd.Series(df.astype(np.int64), index=self.terms, name="df")

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.matrix.toarray(), columns=self.terms)


def build_dtm(corpus) -> DocumentTermMatrix:
    corpus = list(corpus)
    if not any(_without_padding(doc) for doc in corpus):
        return DocumentTermMatrix(csr_matrix((len(corpus), 0), dtype=np.int64), np.array([], dtype=object))

    # documents arrive tokenized; the vectorizer only counts
    vectorizer = CountVectorizer(analyzer=_without_padding, lowercase=False, dtype=np.int64)
    X = vectorizer.fit_transform(corpus)
    return DocumentTermMatrix(csr_matrix(X), vectorizer.get_feature_names_out())


def count_terms(corpus, vocabulary=None, docs=None) -> pd.Series:
    """Term -> raw count over `docs` (all documents when None)."""
    corpus = list(corpus)
    selected = range(len(corpus)) if docs is None else docs
    counts = Counter()
    for i in selected:
        counts.update(_without_padding(corpus[i]))
    if vocabulary is not None:
        counts = {t: counts.get(t, 0) for t in vocabulary}
    s = pd.Series(counts, dtype=np.int64, name="count")
    return s.sort_index()


def lookup(scores, term, default=0.0):
    """Score of `term`, or `default` when the term is outside the vocabulary."""
    return scores.get(term, default)


def top_terms(scores, n=TOP_N, ascending=False) -> pd.Series:
    """Highest (or lowest) `n` scores; ties broken by term."""
    df = pd.DataFrame({"term": scores.index.astype(str), "score": np.asarray(scores, dtype=float)})
    df = df.sort_values(["score", "term"], ascending=[ascending, True], kind="mergesort")
    return pd.Series(df["score"].to_numpy(), index=df["term"].to_numpy(), name=scores.name).head(n)
