"""
Terms and the ordered chain of terms which backs every polynomial.

The chain is a plain list addressed by position. Every mutation bumps the
chain's version number, which is how the derivative cache detects that the
polynomial it memoizes has changed.
"""

import collections
from .errors import TermIndexError

class Term(collections.namedtuple('Term', ('coefficient', 'exponents'))):
    """ A monomial: coefficient * x_1^e_1 * x_2^e_2 * ... * x_n^e_n """
    __slots__ = ()

    def __new__(cls, coefficient, exponents):
        exponents = tuple(exponents)
        for power in exponents:
            if int(power) != power or power < 0:
                raise ValueError(f'exponents must be non-negative integers, got {exponents}')
        exponents = tuple(int(power) for power in exponents)
        return super().__new__(cls, float(coefficient), exponents)

    @property
    def degree(self):
        return sum(self.exponents)

    def is_constant(self):
        return not any(self.exponents)

    def replace_coefficient(self, coefficient):
        return Term(coefficient, self.exponents)

    def replace_exponents(self, exponents):
        return Term(self.coefficient, exponents)

class TermChain:
    def __init__(self, terms=()):
        self._terms  = list(terms)
        self.version = 0

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        return iter(self._terms)

    def __getitem__(self, index):
        return self.term_at(index)

    @property
    def head(self):
        return self._terms[0] if self._terms else None

    @property
    def tail(self):
        return self._terms[-1] if self._terms else None

    def _check_index(self, index, allow_end=False):
        index = int(index)
        upper = len(self._terms) if allow_end else len(self._terms) - 1
        if index < 0 or index > upper:
            raise TermIndexError(index, len(self._terms))
        return index

    def _touch(self):
        self.version += 1

    def term_at(self, index):
        return self._terms[self._check_index(index)]

    def set_term(self, index, term):
        self._terms[self._check_index(index)] = term
        self._touch()

    def insert(self, index, term):
        """ The new term becomes the term at position `index`. """
        self._terms.insert(self._check_index(index, allow_end=True), term)
        self._touch()

    def remove(self, index):
        """
        Remove the term at position `index`. Every later term shifts down by
        one, so the returned cursor (index - 1) must be used by callers that
        are walking the chain, to revisit the position that was just vacated.
        """
        del self._terms[self._check_index(index)]
        self._touch()
        return index - 1

    def append(self, term):
        self._terms.append(term)
        self._touch()

    def reorder(self, key, reverse=False):
        order = sorted(self._terms, key=key, reverse=reverse)
        if order != self._terms:
            self._terms = order
            self._touch()

    def copy(self):
        return TermChain(self._terms)
