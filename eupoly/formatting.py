"""
Text output for polynomials.

Two styles of variable names are supported: the algebraic style ("x" or
"x_1, x_2, ...") and the expected utility style, where every variable is the
probability "p_{player,strategy}" of a player choosing one of their strategies.
"""

import numbers
import numpy as np

def render(polynomial, variable='x', simplify=True):
    """
    Argument simplify renders the canonical form of the polynomial, otherwise
             the terms are rendered in their current order, skipping zeros.
    """
    if polynomial.num_variables == 1:
        names = [str(variable)]
    else:
        names = [f'{variable}_{var + 1}' for var in range(polynomial.num_variables or 0)]
    return _render_terms(polynomial, names, simplify)

def render_expected_utility(polynomial, player, strategy=None, simplify=True):
    """
    Argument player labels every variable.

    Argument strategy is either None, in which case variable v is labeled as
             strategy v + 1, or a single label used for every variable, or a
             sequence with one label per variable.
    """
    num_variables = polynomial.num_variables or 0
    if strategy is None:
        strategies = [var + 1 for var in range(num_variables)]
    elif isinstance(strategy, (str, numbers.Integral)):
        strategies = [strategy] * num_variables
    else:
        strategies = list(strategy)
        if len(strategies) != num_variables:
            raise ValueError(f'expected {num_variables} strategy labels, got {len(strategies)}')
    names = [f'p_{{{player},{label}}}' for label in strategies]
    return _render_terms(polynomial, names, simplify)

def _format_number(value):
    return format(value, 'g')

def _render_terms(polynomial, names, simplify):
    if polynomial.num_terms == 0:
        raise ValueError('cannot render a polynomial with no terms')
    if simplify:
        polynomial = polynomial.canonical()
    tokens = []
    for term in polynomial.terms:
        coefficient = term.coefficient
        if coefficient == 0:
            continue
        if tokens:
            # The operator between two terms carries the sign of the second.
            tokens.append(' - ' if coefficient < 0 else ' + ')
            coefficient = abs(coefficient)
        if term.is_constant():
            tokens.append(_format_number(coefficient))
        elif coefficient == -1:
            tokens.append('-')
        elif coefficient != 1:
            tokens.append(_format_number(coefficient))
        for name, power in zip(names, term.exponents):
            if power == 0:
                continue
            tokens.append(name)
            if power != 1:
                tokens.append(f'^{power}')
    if not tokens:
        return '0'
    return ''.join(tokens)

def plot(polynomial, a=0.0, b=1.0, name='', num_points=200):
    """ Plot the uniform evaluation of the polynomial over the interval [a, b]. """
    import matplotlib.pyplot as plt
    a = float(a)
    b = float(b)
    assert a < b, 'empty interval'
    x = np.linspace(a, b, int(num_points))
    y = polynomial.eval(x)
    fig_title = name or render(polynomial)
    plt.figure(fig_title)
    plt.title(fig_title)
    plt.plot(x, y, color='k')
    plt.axhline(0.0, color='grey', linewidth=0.5)
    plt.xlabel('x')
    plt.show()
