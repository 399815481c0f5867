"""
Exceptions raised by the polynomial engine. Each one derives from the builtin
exception that a caller would otherwise expect, so that plain `except
ValueError` handlers keep working.
"""

class ParseError(ValueError):
    """ The text is not a polynomial of the form ax^n + bx^m + ... + z """

class TermIndexError(IndexError):
    """ A term index outside of the range [0, num_terms). """
    def __init__(self, index, num_terms):
        self.index      = index
        self.num_terms  = num_terms
        super().__init__(f'term index {index} out of range for polynomial with {num_terms} terms')

class DimensionMismatchError(ValueError):
    """ Two polynomials (or a polynomial and a term) disagree on the number of variables. """
    def __init__(self, expected, actual):
        self.expected   = expected
        self.actual     = actual
        super().__init__(f'expected {expected} variables, got {actual}')

class DegenerateIntegrationError(ZeroDivisionError):
    pass
