import logging
import re
import unicodedata

from nltk.tokenize import RegexpTokenizer

from keyterms.config import PADDING, TokenizerConfig

logger = logging.getLogger(__name__)

# words (with inner hyphens/apostrophes), numbers, or any single other char
WORD_PATTERN = r"\w+(?:[-'’]\w+)*|[^\w\s]"
NUMBER_RE = re.compile(r"^\d+(?:st|nd|rd|th|s)?$", re.I)

_tokenizer = RegexpTokenizer(WORD_PATTERN)


def _category(tok):
    if NUMBER_RE.match(tok):
        return "number"
    if len(tok) == 1 and not tok.isalnum():
        cat = unicodedata.category(tok)
        if cat.startswith("P"):
            return "punct"
        return "symbol"
    return "word"


def tokenize_text(text, config: TokenizerConfig):
    tokens = []
    for tok in _tokenizer.tokenize(text or ""):
        kind = _category(tok)
        if kind == "punct" and config.remove_punct:
            continue
        if kind == "number" and config.remove_numbers:
            continue
        if kind == "symbol" and config.remove_symbols:
            continue
        if config.lowercase:
            tok = tok.lower()
        tok = config.lemmas.get(tok, tok)
        if tok in config.stopwords:
            if config.padding:
                tokens.append(PADDING)
            continue
        tokens.append(tok)
    return tokens


def tokenize(texts, config=None):
    """Turn raw texts into a corpus (one token list per text).

    Stopwords are replaced by the padding token when ``config.padding`` is set
    so that collocation counts never bridge a removed word.
    """
    if config is None:
        config = TokenizerConfig()
    corpus = [tokenize_text(t, config) for t in texts]
    logger.info("Tokenized %d documents (%d tokens)", len(corpus), sum(len(d) for d in corpus))
    return corpus


def remove_padding(corpus):
    return [[tok for tok in doc if tok != PADDING] for doc in corpus]
