from hypothesis import given, settings, strategies as st

from church.arith import add, exp, mult
from church.construct import from_int, one, succ, zero
from church.extract import to_int

naturals = st.integers(min_value=0, max_value=60)
small = st.integers(min_value=0, max_value=15)


@given(naturals)
def test_round_trip(k: int) -> None:
    assert to_int(from_int(k)) == k


@given(naturals)
def test_succ_adds_one(k: int) -> None:
    n = from_int(k)

    assert to_int(succ(n)) == to_int(n) + 1


@given(naturals)
def test_zero_is_additive_identity(k: int) -> None:
    n = from_int(k)

    assert to_int(add(n, zero())) == to_int(n)
    assert to_int(add(zero(), n)) == to_int(n)


@given(naturals, naturals)
def test_add_is_commutative(a: int, b: int) -> None:
    n = from_int(a)
    m = from_int(b)

    assert to_int(add(n, m)) == to_int(add(m, n)) == a + b


@given(naturals)
def test_one_is_multiplicative_identity(k: int) -> None:
    n = from_int(k)

    assert to_int(mult(n, one())) == to_int(n)
    assert to_int(mult(one(), n)) == to_int(n)


@given(naturals)
def test_zero_annihilates(k: int) -> None:
    n = from_int(k)

    assert to_int(mult(n, zero())) == 0
    assert to_int(mult(zero(), n)) == 0


@given(naturals, naturals)
def test_mult_matches_integer_product(a: int, b: int) -> None:
    assert to_int(mult(from_int(a), from_int(b))) == a * b


@given(small, small, small)
def test_mult_distributes_over_add(k: int, a: int, b: int) -> None:
    n = from_int(k)
    x = from_int(a)
    y = from_int(b)

    lhs = mult(n, add(x, y))
    rhs = add(mult(n, x), mult(n, y))

    assert to_int(lhs) == to_int(rhs)


@settings(max_examples=50)
@given(st.integers(min_value=0, max_value=5), st.integers(min_value=0, max_value=4))
def test_exp_matches_integer_power(a: int, b: int) -> None:
    assert to_int(exp(from_int(a), from_int(b))) == a**b
