from dataclasses import dataclass, field
from typing import Tuple

import secrets

from errors import InvalidThreshold
from params import check_secret

@dataclass(frozen=True)
class Polynomial:
    """f(x) = a_0 + a_1 x + ... + a_{k-1} x^{k-1} over Z_q, with a_0 the secret.

    Coefficients are kept out of repr so the polynomial never ends up in logs.
    """
    coefficients: Tuple[int, ...] = field(repr=False)
    q: int

    @property
    def threshold(self):
        return len(self.coefficients)

def generate(secret, threshold, shares, params, rng=None):
    if threshold < 1:
        raise InvalidThreshold(f'threshold must be at least 1, got {threshold}')
    if threshold > shares:
        raise InvalidThreshold(f'threshold {threshold} exceeds share count {shares}')
    check_secret(secret, params)

    if rng is None:
        rng = secrets.SystemRandom()

    q = params.q
    coeffs = [secret]
    for _ in range(threshold - 1):
        coeffs.append(rng.randrange(q))
    return Polynomial(tuple(coeffs), q)

def evaluate(polynomial, x):
    # Horner's rule, highest coefficient first
    q = polynomial.q
    y = 0
    for c in reversed(polynomial.coefficients):
        y = (y * x + c) % q
    return y
