"""
Derivatives, integrals and evaluation.

These routines read their polynomial argument and build new polynomials; the
argument is never modified.

Note: evaluation substitutes the same value into every variable. An expected
utility polynomial assigns one variable per strategy probability, so this is
the evaluation at the point where all of the probabilities are equal.
"""

import numpy as np
from .errors import DegenerateIntegrationError

def monomial_derivative(polynomial, var):
    """
    Differentiate each term as a monomial in the variable x_var.

    Every term containing x_var^e becomes e * x_var^(e-1) times its
    coefficient, and the exponents of all of the other variables are set to
    zero. Terms which do not contain x_var are dropped. This matches the
    expected utility representation, where each term models a single
    variable's contribution, but for terms mixing several variables it is NOT
    the partial derivative.
    """
    var    = polynomial.check_variable(var)
    result = polynomial.empty_like()
    for term in polynomial.terms:
        power = term.exponents[var]
        if power == 0:
            continue
        exponents = [0] * polynomial.num_variables
        exponents[var] = power - 1
        result.append_term(term.coefficient * power, exponents)
    if result.num_terms == 0:
        result.append_term(0.0, [0] * polynomial.num_variables)
    return result

def integrate(polynomial, var):
    """
    Indefinite integral with respect to x_var.

    The constant of integration is not included.
    """
    var    = polynomial.check_variable(var)
    result = polynomial.empty_like()
    for term in polynomial.terms:
        exponents = list(term.exponents)
        exponents[var] += 1
        if exponents[var] == 0:
            raise DegenerateIntegrationError(f'cannot integrate term {term}: zero exponent after integration')
        result.append_term(term.coefficient / exponents[var], exponents)
    return result

def integrate_over_interval(polynomial, a, b, var):
    """ Definite integral from a to b, using the uniform evaluation. """
    antiderivative = integrate(polynomial, var)
    return evaluate(antiderivative, b) - evaluate(antiderivative, a)

def evaluate(polynomial, value):
    """
    Substitute the value into every variable of every term and sum the terms.

    Argument value is either a scalar or an array of values, in which case the
    result is an array of the same shape.
    """
    if polynomial.num_terms == 0:
        raise ValueError('cannot evaluate a polynomial with no terms')
    value  = np.asarray(value, dtype=np.float64)
    powers = np.power(value[..., np.newaxis, np.newaxis], polynomial.exponents)
    result = np.prod(powers, axis=-1).dot(polynomial.coefficients)
    if np.ndim(result) == 0:
        return float(result)
    return result
