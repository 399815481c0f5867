from eupoly import Polynomial, Term, TermChain, TermIndexError, DimensionMismatchError
import pytest

def make_chain():
    return TermChain([Term(1, [2]), Term(2, [1]), Term(3, [0])])

def test_term():
    term = Term(2, [1, 0, 3])
    assert isinstance(term.coefficient, float)
    assert term.exponents == (1, 0, 3)
    assert term.degree == 4
    assert not term.is_constant()
    assert Term(5, [0, 0]).is_constant()
    with pytest.raises(ValueError):
        Term(1, [-1])
    with pytest.raises(ValueError):
        Term(1, [1.5])

def test_remove_term():
    chain = make_chain()
    first, middle, last = list(chain)
    version = chain.version
    cursor = chain.remove(1)
    assert cursor == 0
    assert len(chain) == 2
    assert list(chain) == [first, last]
    assert chain.version > version
    # Removing the head moves the cursor before the start of the chain.
    assert chain.remove(0) == -1
    assert chain.head == last

def test_remove_while_walking():
    p = Polynomial(1, [(0, [3]), (0, [2]), (4, [1]), (0, [0])])
    t = 0
    while t < p.num_terms:
        if p.get_coefficient(t) == 0:
            t = p.remove_term(t)
        t += 1
    assert list(p) == [Term(4, [1])]

def test_insert_term():
    p = Polynomial(1, [(1, [2]), (3, [0])])
    p.insert_term(1, [1], 2)
    assert [term.exponents for term in p] == [(2,), (1,), (0,)]
    p.insert_term(0, [3], 4)
    assert p.head == Term(4, [3])
    p.insert_term(p.num_terms, [5], 1)
    assert p.tail == Term(1, [5])
    assert p.num_terms == 5
    with pytest.raises(TermIndexError):
        p.insert_term(7, [0], 1)

def test_append_to_empty():
    p = Polynomial()
    assert p.num_terms == 0
    assert p.num_variables is None
    assert p.total_degree is None
    assert p.head is None and p.tail is None
    p.append_term(2, [1, 0])
    assert p.num_variables == 2
    assert p.head is p.tail
    p.append_term(3, [0, 0])
    assert p.tail == Term(3, [0, 0])
    with pytest.raises(DimensionMismatchError):
        p.append_term(1, [1])

@pytest.mark.parametrize('index', [-1, 3, 10])
def test_index_out_of_range(index):
    p = Polynomial(1, make_chain())
    with pytest.raises(TermIndexError):
        p.term_at(index)
    with pytest.raises(TermIndexError):
        p.remove_term(index)
    with pytest.raises(IndexError):
        p.set_coefficient(index, 1.0)
    assert p.num_terms == 3

def test_setters():
    p = Polynomial.generate(3, 2, 0)
    p.set_coefficient(0, 5)
    p.set_exponent(1, 1, 4)
    p.set_exponents(2, [0, 1])
    assert p.get_coefficient(0) == 5
    assert p.get_exponents(1) == (1, 4)
    assert p.get_exponent(1, 1) == 4
    assert p.get_exponents(2) == (0, 1)
    p.set_term(2, Term(7, [3, 3]))
    assert p.term_at(2) == Term(7, [3, 3])
    with pytest.raises(DimensionMismatchError):
        p.set_exponents(0, [1, 2, 3])
    with pytest.raises(IndexError):
        p.set_exponent(0, 2, 1)

def test_setters_bump_version():
    p = Polynomial(1, [(1, [1])])
    versions = [p.version]
    p.set_coefficient(0, 2)
    versions.append(p.version)
    p.append_term(1, [0])
    versions.append(p.version)
    p.remove_term(1)
    versions.append(p.version)
    assert versions == sorted(set(versions))

def test_generate():
    p = Polynomial.generate(4, 2, 1)
    assert [term.exponents for term in p] == [(0, 3), (0, 2), (0, 1), (0, 0)]
    assert all(term.coefficient == 0 for term in p)
    assert p.total_degree is None
    q = Polynomial.generate(None, 3, 2)
    assert list(q) == [Term(1, [0, 0, 1])]
    assert q.total_degree == 1
    with pytest.raises(ValueError):
        Polynomial.generate(0, 1, 0)
    with pytest.raises(IndexError):
        Polynomial.generate(2, 1, 1)

def test_total_degree():
    p = Polynomial(2, [(1, [2, 1]), (3, [0, 1])])
    assert p.total_degree is None
    assert p.compute_total_degree() == 3
    assert p.total_degree == 3
    p.append_term(1, [4, 0])
    assert p.total_degree is None
    assert p.compute_total_degree() == 4

def test_get_non_zero_exponent():
    p = Polynomial(2, [(1, [1, 0]), (-2, [0, 1]), (3, [0, 0])])
    assert p.get_non_zero_exponent(0) == 0
    assert p.get_non_zero_exponent(1) == 1
    assert p.get_non_zero_exponent(2) == 2
