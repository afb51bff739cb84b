import logging
from dataclasses import dataclass, field
from pathlib import Path

import joblib
import pandas as pd

from keyterms.collocations import detect, top_pairs
from keyterms.compound import compound
from keyterms.config import (
    COLLOCATION_MIN_COUNT,
    GROUP_COLUMN,
    SPEECHES_CSV,
    TEXT_COLUMN,
    TOP_COLLOCATIONS,
    TokenizerConfig,
)
from keyterms.tokens import tokenize

logger = logging.getLogger(__name__)


def load_speeches(path: Path = SPEECHES_CSV, text_column=TEXT_COLUMN, group_column=GROUP_COLUMN) -> pd.DataFrame:
    """Speech metadata and text; the row position is the document index."""
    df = pd.read_csv(path)
    for col in (text_column, group_column):
        if col is not None and col not in df.columns:
            raise ValueError(f"Expected '{col}' column in {path}")
    df[text_column] = df[text_column].fillna("").astype(str)
    return df.reset_index(drop=True)


@dataclass
class PreprocessResult:
    corpus: list
    collocations: pd.DataFrame
    pairs: list = field(default_factory=list)


def preprocess(texts, config: TokenizerConfig, min_count=COLLOCATION_MIN_COUNT, top_k=TOP_COLLOCATIONS):
    """tokenize -> detect collocations -> compound the top `top_k` -> drop padding"""
    tokens = tokenize(texts, config)
    collocations = detect(tokens, min_count=min_count)
    pairs = top_pairs(collocations, top_k)
    corpus = compound(tokens, pairs)
    logger.info("Preprocessed %d documents; %d of %d collocations compounded", len(corpus), len(pairs), len(collocations))
    return PreprocessResult(corpus=corpus, collocations=collocations, pairs=pairs)


def save_result(result: PreprocessResult, path: Path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(
        {"corpus": result.corpus, "collocations": result.collocations, "pairs": result.pairs},
        path,
    )


def load_result(path: Path) -> PreprocessResult:
    artifacts = joblib.load(path)
    return PreprocessResult(
        corpus=artifacts["corpus"],
        collocations=artifacts["collocations"],
        pairs=[tuple(p) for p in artifacts["pairs"]],
    )
