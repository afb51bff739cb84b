from keyterms.errors import KeyTermsError, InvalidThreshold, EmptyVocabulary
from keyterms.config import TokenizerConfig
from keyterms.tokens import tokenize, remove_padding
from keyterms.counts import DocumentTermMatrix, build_dtm, count_terms, lookup, top_terms
from keyterms.collocations import detect, top_pairs
from keyterms.compound import compound
from keyterms.llr import log_likelihood, significant, p_values

__version__ = "0.1.0"
