class KeyTermsError(ValueError):
    pass


class InvalidThreshold(KeyTermsError):
    """Raised for a count threshold or cut-off outside its domain."""


class EmptyVocabulary(KeyTermsError):
    """A term-count vector sums to zero, so relative frequencies are undefined."""

    def __init__(self, side):
        self.side = side
        super().__init__(f"{side} term counts sum to zero; log-likelihood is undefined")
