from eupoly import Polynomial, Term, ParseError, parse
import pytest

def test_parse():
    p = parse('3x^2+2x+1')
    assert p.num_variables == 1
    assert list(p) == [Term(3, [2]), Term(2, [1]), Term(1, [0])]
    assert p.total_degree is None

def test_whitespace():
    assert list(parse(' 3 x ^ 2 +\tx ')) == [Term(3, [2]), Term(1, [1])]

def test_terms_keep_their_order():
    assert list(parse('1+x^2+x')) == [Term(1, [0]), Term(1, [2]), Term(1, [1])]
    assert list(parse('x+x')) == [Term(1, [1]), Term(1, [1])]

def test_subtraction():
    assert list(parse('x^2-2x-1')) == [Term(1, [2]), Term(-2, [1]), Term(-1, [0])]
    assert list(parse('-x+3')) == [Term(-1, [1]), Term(3, [0])]
    assert list(parse('4+-0.5x')) == [Term(4, [0]), Term(-0.5, [1])]

def test_coefficients():
    assert list(parse('2*x^3')) == [Term(2, [3])]
    assert list(parse('1.5x')) == [Term(1.5, [1])]
    assert list(parse('.25')) == [Term(0.25, [0])]
    assert list(parse('x^0')) == [Term(1, [0])]

def test_other_variable():
    assert list(parse('p^2+p', variable='p')) == [Term(1, [2]), Term(1, [1])]
    with pytest.raises(ParseError):
        parse('p^2+x', variable='p')
    with pytest.raises(ValueError):
        parse('x', variable='xy')

def test_parsing_constructor():
    assert Polynomial.parse('x^2+1') == parse('1+x^2')

def test_parsing_constructor_from_subclass():
    class Named(Polynomial):
        pass
    assert type(Polynomial.parse('x')) is Polynomial
    assert type(Named.parse('x')) is Polynomial
    assert Named.parse('2x^3-x') == parse('-x+2x^3')

@pytest.mark.parametrize('text', [
    '',
    '   ',
    'y+1',
    '3x^2+2y',
    'x^2+',
    '+x',
    '3^2',
    'x^1.5',
    'x^-2',
    'x^a',
    'x^2^3',
    'x^1_0',
    'x^²',
    'x^',
    '1..2x',
    'x2',
    '*x',
    '2x+-',
])
def test_malformed(text):
    with pytest.raises(ParseError):
        parse(text)

def test_parse_error_is_value_error():
    with pytest.raises(ValueError, match='unexpected character "y"'):
        parse('y')
