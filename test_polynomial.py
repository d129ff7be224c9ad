import random

import pytest

from errors import InvalidThreshold, SecretOutOfRange
from fastec import SECP256K1
from polynomial import Polynomial, evaluate, generate

def test_generate_sets_secret_as_constant_term(toy, rng):
    polynomial = generate(143, 3, 5, toy, rng)
    assert polynomial.coefficients[0] == 143
    assert polynomial.threshold == 3
    assert polynomial.q == toy.q
    assert all(0 <= a < toy.q for a in polynomial.coefficients)

@pytest.mark.parametrize('t, n', [(0, 5), (-1, 5), (6, 5), (2, 1)])
def test_generate_invalid_threshold(toy, t, n):
    with pytest.raises(InvalidThreshold):
        generate(143, t, n, toy)

def test_generate_secret_out_of_range(toy):
    with pytest.raises(SecretOutOfRange):
        generate(toy.q, 2, 3, toy)

def test_generate_is_reproducible_with_seeded_rng(toy):
    a = generate(10, 4, 6, toy, random.Random(7))
    b = generate(10, 4, 6, toy, random.Random(7))
    assert a == b

def test_generate_coefficients_span_field():
    # Coefficients are not bounded by the secret
    secret = 4
    polynomial = generate(secret, 8, 8, SECP256K1, random.Random(3))
    assert max(polynomial.coefficients[1:]) > secret
    assert any(a.bit_length() > 128 for a in polynomial.coefficients[1:])

def test_repr_hides_coefficients():
    polynomial = Polynomial((123456789, 987654321), 1000000007)
    text = repr(polynomial)
    assert '123456789' not in text
    assert '987654321' not in text
    assert '1000000007' in text

def test_evaluate_horner_matches_power_sum(toy, rng):
    polynomial = generate(99, 5, 10, toy, rng)
    for x in range(0, 20):
        expected = sum(a * x ** i for i, a in enumerate(polynomial.coefficients)) % toy.q
        assert evaluate(polynomial, x) == expected

def test_evaluate_at_zero_is_secret(toy, rng):
    polynomial = generate(500, 3, 3, toy, rng)
    assert evaluate(polynomial, 0) == 500

def test_evaluate_is_deterministic(toy, rng):
    polynomial = generate(1, 3, 5, toy, rng)
    assert [evaluate(polynomial, 2) for _ in range(5)] == [evaluate(polynomial, 2)] * 5

def test_threshold_one_is_constant(toy, rng):
    polynomial = generate(77, 1, 4, toy, rng)
    assert polynomial.coefficients == (77,)
    assert {evaluate(polynomial, x) for x in range(1, 50)} == {77}
