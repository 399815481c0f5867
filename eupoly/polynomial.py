from . import calculus
from . import formatting
from .cache import DerivativeCache
from .errors import DimensionMismatchError
from .terms import Term, TermChain
import functools
import numbers
import numpy as np

@functools.total_ordering
class Polynomial:
    """
    Multivariate polynomial over the reals, stored as an ordered chain of terms.

    Every term has exactly `num_variables` exponents. A polynomial made with
    no arguments is uninitialized: it has no terms and its number of variables
    is fixed by the first term appended to it.
    """
    def __init__(self, num_variables=None, terms=(), verbose=False):
        if num_variables is not None:
            num_variables = int(num_variables)
            if num_variables < 0:
                raise ValueError(f'num_variables must be non-negative, got {num_variables}')
        self.num_variables  = num_variables
        self.terms          = TermChain()
        self.linear         = True
        self.verbose        = bool(verbose)
        self._total_degree  = (None, None) # Pair of (version, degree)
        self._derivatives   = DerivativeCache(self, self.verbose)
        for term in terms:
            if not isinstance(term, Term):
                term = Term(*term)
            self.terms.append(self._check_term(term))

    @classmethod
    def generate(cls, num_terms, num_variables, var, verbose=False):
        """
        Make the template a_{n-1} x^{n-1} + ... + a_1 x + a_0 in the variable
        x_var, where n = num_terms, with all of the coefficients set to zero.

        If num_terms or var is None then the result is the monomial 1 x_var
        instead, or the constant 1 when var is None.
        """
        polynomial = cls(num_variables, verbose=verbose)
        if var is not None:
            var = polynomial.check_variable(var)
        if num_terms is None or var is None:
            exponents = [0] * polynomial.num_variables
            if var is not None:
                exponents[var] = 1
            polynomial.append_term(1.0, exponents)
            polynomial.compute_total_degree()
            return polynomial
        num_terms = int(num_terms)
        if num_terms < 1:
            raise ValueError(f'num_terms must be positive, got {num_terms}')
        for power in reversed(range(num_terms)):
            exponents = [0] * polynomial.num_variables
            exponents[var] = power
            polynomial.append_term(0.0, exponents)
        return polynomial

    @staticmethod
    def parse(text, variable='x', verbose=False):
        from .parser import parse
        return parse(text, variable, verbose=verbose)

    def copy(self):
        duplicate = Polynomial(self.num_variables, self.terms, self.verbose)
        duplicate.linear = self.linear
        return duplicate

    def empty_like(self):
        """ Polynomial with the same number of variables and no terms. """
        return Polynomial(self.num_variables, verbose=self.verbose)

    def constant(self, value):
        return Polynomial(self.num_variables, [Term(value, [0] * self.num_variables)], self.verbose)

    # Term chain access.

    @property
    def num_terms(self):
        return len(self.terms)

    @property
    def version(self):
        """ Incremented by every modification of the terms. """
        return self.terms.version

    @property
    def head(self):
        return self.terms.head

    @property
    def tail(self):
        return self.terms.tail

    @property
    def coefficients(self):
        return np.array([term.coefficient for term in self.terms], dtype=np.float64)

    @property
    def exponents(self):
        return np.array([term.exponents for term in self.terms], dtype=np.int64).reshape(
                self.num_terms, self.num_variables or 0)

    def __len__(self):
        return self.num_terms

    def __iter__(self):
        return iter(self.terms)

    def check_variable(self, var):
        if self.num_variables is None:
            raise ValueError('polynomial is uninitialized, it has no variables')
        var = int(var)
        if not 0 <= var < self.num_variables:
            raise IndexError(f'variable index {var} out of range for {self.num_variables} variables')
        return var

    def _check_term(self, term):
        if self.num_variables is None:
            self.num_variables = len(term.exponents)
        elif len(term.exponents) != self.num_variables:
            raise DimensionMismatchError(self.num_variables, len(term.exponents))
        return term

    def term_at(self, t):
        return self.terms.term_at(t)

    def get_coefficient(self, t):
        return self.terms.term_at(t).coefficient

    def get_exponent(self, t, var):
        return self.terms.term_at(t).exponents[self.check_variable(var)]

    def get_exponents(self, t):
        return self.terms.term_at(t).exponents

    def get_non_zero_exponent(self, t):
        """
        Index of the first variable in term t with a nonzero exponent. For a
        constant term this returns num_terms - 1, which is the position of the
        constant in the expected utility layout (see set_eu_coefficients).
        """
        for var, power in enumerate(self.get_exponents(t)):
            if power != 0:
                return var
        return self.num_terms - 1

    def set_term(self, t, term):
        if not isinstance(term, Term):
            term = Term(*term)
        self.terms.set_term(t, self._check_term(term))

    def set_coefficient(self, t, coefficient):
        self.set_term(t, self.term_at(t).replace_coefficient(coefficient))

    def set_exponent(self, t, var, power):
        exponents = list(self.get_exponents(t))
        exponents[self.check_variable(var)] = power
        self.set_term(t, self.term_at(t).replace_exponents(exponents))

    def set_exponents(self, t, exponents):
        self.set_term(t, self.term_at(t).replace_exponents(exponents))

    def append_term(self, coefficient, exponents):
        self.terms.append(self._check_term(Term(coefficient, exponents)))

    def insert_term(self, t, exponents, coefficient):
        self.terms.insert(t, self._check_term(Term(coefficient, exponents)))

    def remove_term(self, t):
        """ Returns the cursor t - 1, see TermChain.remove """
        return self.terms.remove(t)

    # Expected utilities.

    def set_eu_coefficients(self, coefficients):
        """
        Fill in the expected utility

            a_0 p_0 + ... + a_{n-2} p_{n-2} + a_{n-1} (1 - p_0 - ... - p_{n-2})
          = (a_0 - a_{n-1}) p_0 + ... + (a_{n-2} - a_{n-1}) p_{n-2} + a_{n-1}

        where n = num_terms and the last probability is eliminated because the
        probabilities sum to one. Term i < n-1 becomes (a_i - a_{n-1}) x_i and
        the last term becomes the constant a_{n-1}.
        """
        coefficients = [float(value) for value in coefficients]
        if len(coefficients) != self.num_terms:
            raise ValueError(f'expected {self.num_terms} coefficients, got {len(coefficients)}')
        if self.num_terms - 1 > self.num_variables:
            raise DimensionMismatchError(self.num_terms - 1, self.num_variables)
        last = coefficients[-1]
        for t in range(self.num_terms - 1):
            exponents = [0] * self.num_variables
            exponents[t] = 1
            self.set_term(t, Term(coefficients[t] - last, exponents))
        self.set_term(self.num_terms - 1, Term(last, [0] * self.num_variables))

    def set_eu_exponents(self, exponents):
        exponents = list(exponents)
        if len(exponents) != self.num_terms:
            raise ValueError(f'expected {self.num_terms} exponent tuples, got {len(exponents)}')
        for t, powers in enumerate(exponents):
            self.set_exponents(t, powers)

    # Canonical form.

    def simplify(self):
        """
        Merge like terms, remove the terms with zero coefficients and sort the
        remaining terms into lexicographic order.

        The zero polynomial is kept as a single constant term with a zero
        coefficient.
        """
        if self.num_terms == 0:
            return
        t1 = 0
        while t1 < self.num_terms:
            t2 = t1 + 1
            while t2 < self.num_terms:
                if self.get_exponents(t1) == self.get_exponents(t2):
                    self.set_coefficient(t1, self.get_coefficient(t1) + self.get_coefficient(t2))
                    t2 = self.remove_term(t2)
                t2 += 1
            t1 += 1
        t = 0
        while t < self.num_terms:
            if self.get_coefficient(t) == 0 and self.num_terms > 1:
                t = self.remove_term(t)
            t += 1
        if self.num_terms == 1 and self.get_coefficient(0) == 0 and not self.is_constant_term(0):
            self.set_term(0, Term(0.0, [0] * self.num_variables))
        self.lex_order()

    def lex_order(self):
        """ Sort the terms by their exponents, in descending lexicographic order. """
        self.terms.reorder(key=lambda term: term.exponents, reverse=True)

    def canonical(self):
        """ Returns a simplified copy of this polynomial. """
        result = self.copy()
        result.simplify()
        return result

    @property
    def total_degree(self):
        """ None until compute_total_degree() is called after the last modification. """
        version, degree = self._total_degree
        if version != self.version:
            return None
        return degree

    def compute_total_degree(self):
        degree = max((term.degree for term in self.terms), default=0)
        self._total_degree = (self.version, degree)
        return degree

    # Classification.

    def is_constant(self):
        return all(term.is_constant() for term in self.terms)

    def is_constant_term(self, t):
        return self.term_at(t).is_constant()

    def is_linear(self):
        """ True if no term has more than one variable. Also updates the `linear` flag. """
        self.linear = all(sum(power != 0 for power in term.exponents) <= 1 for term in self.terms)
        return self.linear

    # Calculus.

    def monomial_derivative(self, var):
        return calculus.monomial_derivative(self, var)

    def get_derivative(self, order, var):
        """
        Returns the order-th monomial derivative with respect to x_var.

        Results are cached, and the cache is discarded when this polynomial is
        modified. The returned polynomial is shared with the cache, copy it
        before modifying it to avoid a recomputation.
        """
        return self._derivatives.get(order, self.check_variable(var))

    def get_derivatives(self):
        """ Dictionary of var -> [self, first derivative, second derivative, ...] """
        return self._derivatives.chains()

    def derivative_cache_size(self, var=None):
        if var is None:
            return len(self._derivatives)
        return self._derivatives.size(var)

    def integrate(self, var):
        return calculus.integrate(self, var)

    def integrate_over_interval(self, a, b, var):
        return calculus.integrate_over_interval(self, a, b, var)

    def eval(self, value):
        return calculus.evaluate(self, value)

    # Arithmetic.

    def _check_compatible(self, other):
        for polynomial in (self, other):
            if polynomial.num_terms == 0:
                raise ValueError('polynomial is uninitialized, it has no terms')
        if self.num_variables != other.num_variables:
            raise DimensionMismatchError(self.num_variables, other.num_variables)

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, numbers.Real) and self.num_variables is not None:
            return self.constant(other)
        return None

    def _combine(self, other, sign):
        self._check_compatible(other)
        result = self.copy()
        for term in other.terms:
            result.append_term(sign * term.coefficient, term.exponents)
        result.simplify()
        result.compute_total_degree()
        return result

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._combine(other, 1.0)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._combine(other, -1.0)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._combine(self, -1.0)

    def __neg__(self):
        return self * -1.0

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            result = self.empty_like()
            for term in self.terms:
                result.append_term(term.coefficient * other, term.exponents)
        elif isinstance(other, Polynomial):
            self._check_compatible(other)
            coefficients = np.outer(self.coefficients, other.coefficients).reshape(-1)
            exponents    = (self.exponents[:, np.newaxis, :] + other.exponents[np.newaxis, :, :])
            exponents    = exponents.reshape(len(coefficients), self.num_variables)
            result = self.empty_like()
            for coefficient, powers in zip(coefficients, exponents):
                result.append_term(coefficient, powers)
        else:
            return NotImplemented
        result.simplify()
        result.compute_total_degree()
        return result

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.__mul__(other)
        return NotImplemented

    # Comparison.

    def __eq__(self, other):
        """
        Compares the canonical forms term by term. Coefficients must be exactly
        equal, so results which differ only by floating point rounding, such as
        (0.1x + 0.2x) + 0.3x and 0.1x + (0.2x + 0.3x), are not equal.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.num_variables != other.num_variables:
            return False
        lhs = self.canonical()
        rhs = other.canonical()
        if lhs.compute_total_degree() != rhs.compute_total_degree():
            return False
        if lhs.num_terms != rhs.num_terms:
            return False
        for lhs_term, rhs_term in zip(lhs.terms, rhs.terms):
            if lhs_term.coefficient != rhs_term.coefficient:
                return False
            if lhs_term.exponents != rhs_term.exponents:
                return False
        return True

    __hash__ = None

    def __lt__(self, other):
        """
        Strict order for sorting polynomials deterministically: by total
        degree, then by the canonical sequence of terms. This does not
        compare the values of the polynomials.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_compatible(other)
        lhs = self.canonical()
        rhs = other.canonical()
        return lhs._sort_key() < rhs._sort_key()

    def _sort_key(self):
        return (self.compute_total_degree(),
                [(term.exponents, term.coefficient) for term in self.terms])

    # Text.

    def __str__(self):
        return formatting.render(self)

    def __repr__(self):
        terms = ', '.join(f'({term.coefficient!r}, {term.exponents!r})' for term in self.terms)
        return f'Polynomial(num_variables={self.num_variables!r}, terms=[{terms}])'
