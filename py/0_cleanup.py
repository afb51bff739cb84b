from keyterms.config import (
    COLLOCATION_MIN_COUNT,
    LEMMA_FILE,
    RESULT_FILE,
    SPEECHES_CSV,
    STOPWORDS_FILE,
    TEXT_COLUMN,
    TOP_COLLOCATIONS,
    TokenizerConfig,
)
from keyterms.corpus import load_speeches, preprocess, save_result
from keyterms.config import configure_logging


def main():
    configure_logging()
    df = load_speeches(SPEECHES_CSV)

    config = TokenizerConfig.from_files(
        stopwords_path=STOPWORDS_FILE if STOPWORDS_FILE.exists() else None,
        lemma_path=LEMMA_FILE if LEMMA_FILE.exists() else None,
    )
    result = preprocess(df[TEXT_COLUMN], config, min_count=COLLOCATION_MIN_COUNT, top_k=TOP_COLLOCATIONS)
    save_result(result, RESULT_FILE)

    n_tokens = sum(len(doc) for doc in result.corpus)
    print(f"✓ Documents: {len(result.corpus)}  tokens: {n_tokens}")
    print(f"✓ Collocations: {len(result.collocations)} candidates, {len(result.pairs)} compounded")
    print(f"✓ Saved corpus to {RESULT_FILE}")


if __name__ == "__main__":
    main()
