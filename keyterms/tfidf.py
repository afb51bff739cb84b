"""Raw-count TF-IDF.

TF is the raw count of a term (no length normalisation) and
IDF = log2(N / df). Weights are not renormalised, so they rank terms within
one document or subset but are not comparable across documents.
"""
import numpy as np
import pandas as pd
from scipy.sparse import csr_matrix, diags

from keyterms.counts import DocumentTermMatrix


def idf(dtm: DocumentTermMatrix) -> pd.Series:
    df = dtm.document_frequency()
    df = df[df > 0]
    return np.log2(dtm.n_docs / df).rename("idf")


def _idf_vector(dtm):
    df = dtm.document_frequency().to_numpy(dtype=float)
    out = np.zeros_like(df)
    present = df > 0
    out[present] = np.log2(dtm.n_docs / df[present])
    return out


def score(dtm: DocumentTermMatrix) -> csr_matrix:
    """TF x IDF for every (document, term) cell."""
    weighted = dtm.matrix.astype(float) @ diags(_idf_vector(dtm))
    return csr_matrix(weighted)


def score_document(dtm: DocumentTermMatrix, doc_index) -> pd.Series:
    tf = dtm.document_counts(doc_index)
    return (tf * idf(dtm).reindex(tf.index)).rename("tfidf")


def score_subset(dtm: DocumentTermMatrix, rows) -> pd.Series:
    """TF summed over `rows`, IDF taken from the whole matrix."""
    tf = dtm.term_counts(rows)
    tf = tf[tf > 0]
    return (tf * idf(dtm).reindex(tf.index)).rename("tfidf")
