"""
Reads polynomials of one variable written as: ax^n + bx^m + ... + yx + z

Coefficients are decimal numbers and may be omitted (meaning 1, or -1 when
only a minus sign is written) or followed by a "*". Exponents are
non-negative integers and may be omitted (meaning 1). Subtraction is allowed.
The terms are kept in the order they were written.
"""

from .errors import ParseError
from .polynomial import Polynomial
import re

_FORM = 'ax^n + bx^m + ... + yx + z'

def parse(text, variable='x', verbose=False):
    variable = str(variable)
    if len(variable) != 1 or not variable.isalpha():
        raise ValueError(f'variable must be a single letter, got "{variable}"')
    text = ''.join(str(text).split())
    if not text:
        raise ParseError(f'empty expression, expected the form {_FORM.replace("x", variable)}')
    for character in text:
        if character.isalpha() and character != variable:
            raise ParseError(f'unexpected character "{character}", '
                             f'expected the form {_FORM.replace("x", variable)}')
    # Rewrite subtraction as the addition of a negative term.
    text = re.sub(rf'(?<=[0-9.{variable}])-', '+-', text)
    polynomial = Polynomial(1, verbose=verbose)
    for chunk in text.split('+'):
        coefficient, power = _parse_term(chunk, variable)
        if verbose: print(f'Parsed term "{chunk}" as coefficient {coefficient}, exponent {power}')
        polynomial.append_term(coefficient, [power])
    return polynomial

def _parse_term(chunk, variable):
    if not chunk:
        raise ParseError('empty term')
    parts = chunk.split('^')
    if len(parts) > 2:
        raise ParseError(f'too many "^" in term "{chunk}"')
    literal, has_variable, rest = parts[0].partition(variable)
    if not has_variable:
        if len(parts) == 2:
            raise ParseError(f'constant term "{chunk}" has an exponent')
        return (_parse_number(literal, chunk), 0)
    if rest:
        raise ParseError(f'unexpected "{rest}" after "{variable}" in term "{chunk}"')
    if literal.endswith('*'):
        literal = literal[:-1]
        if literal in ('', '-'):
            raise ParseError(f'missing coefficient before "*" in term "{chunk}"')
    if literal == '':
        coefficient = 1.0
    elif literal == '-':
        coefficient = -1.0
    else:
        coefficient = _parse_number(literal, chunk)
    if len(parts) == 1:
        return (coefficient, 1)
    if parts[1].startswith('-'):
        raise ParseError(f'negative exponent in term "{chunk}"')
    # Plain ASCII digits only, int() would also take "1_0" and other scripts' digits.
    if not (parts[1].isascii() and parts[1].isdigit()):
        raise ParseError(f'malformed exponent "{parts[1]}" in term "{chunk}"')
    return (coefficient, int(parts[1]))

def _parse_number(literal, chunk):
    try:
        return float(literal)
    except ValueError:
        raise ParseError(f'malformed number "{literal}" in term "{chunk}"') from None
