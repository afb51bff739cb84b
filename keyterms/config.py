import csv
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

DATA_DIR = Path("data")
SPEECHES_CSV = DATA_DIR / "speeches.csv"
RESULT_FILE = DATA_DIR / "corpus.joblib"
COLLOCATIONS_CSV = DATA_DIR / "collocations.csv"
WORDCLOUD_DIR = DATA_DIR / "wordclouds"

RESOURCES_DIR = Path("resources")
STOPWORDS_FILE = RESOURCES_DIR / "stopwords_en.txt"
LEMMA_FILE = RESOURCES_DIR / "baseform_en.tsv"

# CSV columns
TEXT_COLUMN = "text"
GROUP_COLUMN = "president"
DATE_COLUMN = "date"

PADDING = ""
COMPOUND_SEPARATOR = "_"

COLLOCATION_MIN_COUNT = 25
TOP_COLLOCATIONS = 250
TOP_N = 50

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

WORDCLOUD_PARAMS = dict(
    width=800,
    height=400,
    background_color="white",
    collocations=False,  # terms are already compounded
    prefer_horizontal=0.8,
    colormap="viridis",
)


def configure_logging(level=None):
    """Set up root logging for the stage scripts; KEYTERMS_LOG_LEVEL overrides INFO."""
    level = (level or os.environ.get("KEYTERMS_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def load_stopwords(path):
    """Read one stopword per line, keeping file order."""
    words = []
    with open(path, encoding="utf-8") as fh:
        for ln in fh:
            ln = ln.strip().lower()
            if ln:
                words.append(ln)
    return words


def load_lemmas(path) -> dict:
    """Read an `inflected<TAB>lemma` table into a dict."""
    df = pd.read_csv(
        path,
        sep="\t",
        header=None,
        names=["inflected", "lemma"],
        dtype=str,
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
        encoding="utf-8",
    )
    df = df[(df["inflected"] != "") & (df["lemma"] != "")]
    df = df.drop_duplicates(subset="inflected", keep="first")
    return dict(zip(df["inflected"], df["lemma"]))


def english_stopwords():
    import nltk
    from nltk.corpus import stopwords

    try:
        return stopwords.words("english")
    except LookupError:
        nltk.download("stopwords", quiet=True)
        return stopwords.words("english")


@dataclass(frozen=True)
class TokenizerConfig:
    """Static resources and switches for :func:`keyterms.tokens.tokenize`."""

    stopwords: frozenset = frozenset()
    lemmas: dict = field(default_factory=dict, hash=False)
    lowercase: bool = True
    remove_punct: bool = True
    remove_numbers: bool = True
    remove_symbols: bool = True
    padding: bool = True

    def __post_init__(self):
        object.__setattr__(self, "stopwords", frozenset(self.stopwords))
        object.__setattr__(self, "lemmas", dict(self.lemmas))

    @classmethod
    def from_files(cls, stopwords_path=None, lemma_path=None, **opts):
        if stopwords_path is None:
            stop = english_stopwords()
        else:
            stop = load_stopwords(stopwords_path)
        lemmas = load_lemmas(lemma_path) if lemma_path is not None else {}
        return cls(stopwords=stop, lemmas=lemmas, **opts)
