"""
Symbolic polynomials for expected utility calculations in game theory.

Usage: python -m eupoly EXPRESSION

A polynomial is an ordered chain of terms, where each term is a coefficient
and a tuple of exponents, one per variable. Expected utilities are written as
polynomials in the mixed strategy probabilities of the other players.
"""

from .errors import ParseError, TermIndexError, DimensionMismatchError, DegenerateIntegrationError
from .parser import parse
from .polynomial import Polynomial
from .formatting import render, render_expected_utility, plot
from .terms import Term, TermChain

__all__ = ('main', 'parse', 'Polynomial', 'Term', 'TermChain',
           'render', 'render_expected_utility', 'plot',
           'ParseError', 'TermIndexError', 'DimensionMismatchError', 'DegenerateIntegrationError')

def main(expression, variable='x', values=(), order=None, integral=False,
         interval=(0.0, 1.0), player=None, strategy=None, show_plot=False, verbose=False):
    """
    Parse the expression and print the requested results.

    Returns the list of printed lines.
    """
    polynomial = parse(expression, variable, verbose=verbose)
    polynomial.simplify()
    degree = polynomial.compute_total_degree()
    a, b   = (float(bound) for bound in interval)
    name   = f'p({variable})'
    lines  = [f'{name} = {render(polynomial, variable)}',
              f'degree = {degree}']
    for value in values:
        lines.append(f'p({value:g}) = {polynomial.eval(value):g}')
    if order is not None:
        derivative = polynomial.get_derivative(order, 0)
        lines.append(f'd^{order}/d{variable}^{order} {name} = {render(derivative, variable)}')
    if integral:
        antiderivative = polynomial.integrate(0)
        area = polynomial.integrate_over_interval(a, b, 0)
        lines.append(f'integral {name} d{variable} = {render(antiderivative, variable)}')
        lines.append(f'integral over [{a:g}, {b:g}] = {area:g}')
    if player is not None:
        lines.append(f'EU = {render_expected_utility(polynomial, player, strategy)}')
    for line in lines:
        print(line)
    if show_plot:
        plot(polynomial, a, b, name=lines[0])
    return lines
