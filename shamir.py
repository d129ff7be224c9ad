from collections import namedtuple
from random import sample

from errors import DuplicateCoordinate, InsufficientShares, InvalidThreshold, ZeroCoordinate
from field import mod_inverse
from polynomial import evaluate, generate

from params import TOY

Share = namedtuple('Share', ['x', 'y'])

def check_coordinates(xs):
    seen = set()
    for x in xs:
        if x == 0:
            raise ZeroCoordinate('share coordinate x = 0 would expose the secret')
        if x in seen:
            raise DuplicateCoordinate(f'coordinate x = {x} appears more than once')
        seen.add(x)

def distribute(polynomial, n, xs=None):
    if xs is None:
        xs = range(1, n + 1)
    xs = list(xs)
    if n < polynomial.threshold:
        raise InvalidThreshold(f'{n} shares can never reach threshold {polynomial.threshold}')
    if len(xs) != n:
        raise InvalidThreshold(f'expected {n} coordinates, got {len(xs)}')
    check_coordinates(x % polynomial.q for x in xs)
    return [Share(x, evaluate(polynomial, x)) for x in xs]

def lagrange(xs, i, q):
    # Basis polynomial for x_i evaluated at 0: prod_{j != i} x_j / (x_j - x_i)
    lamb_i = 1
    for j in xs:
        if j != i:
            lamb_i = lamb_i * j % q
            lamb_i = lamb_i * mod_inverse(j - i, q) % q
    return lamb_i

def reconstruct(shares, threshold, params):
    shares = list(shares)
    if len(shares) < threshold:
        raise InsufficientShares(f'need {threshold} shares, got {len(shares)}')
    q = params.q
    xs = [x % q for x, _ in shares]
    check_coordinates(xs)

    secret = 0
    for x_i, (_, y_i) in zip(xs, shares):
        secret = (secret + lagrange(xs, x_i, q) * y_i) % q
    return secret

def split_secret(secret, t, n, params, rng=None):
    return distribute(generate(secret, t, n, params, rng), n)

def recover_secret(shares, params):
    shares = list(shares)
    return reconstruct(shares, max(len(shares), 1), params)

def test_shamir():
    toy = TOY
    for n in range(3, 10):
        for t in range(1, n + 1):
            for secret in (0, 1, 143, toy.q - 1):
                all_shares = split_secret(secret, t, n, toy)
                assert recover_secret(sample(all_shares, t), toy) == secret

if __name__ == '__main__':
    test_shamir()
