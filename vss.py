"""Feldman verifiable secret sharing.

The dealer publishes C_i = g^{a_i} for every coefficient of its polynomial.
A shareholder holding (x, y) checks

    g^y == prod_i C_i^{x^i}

which holds exactly when y = f(x), because exponentiation is homomorphic:
g^{a_0 + a_1 x + a_2 x^2 + ...} = prod_i (g^{a_i})^{x^i}. The same code runs
over a modular group or an elliptic curve, see FieldParameters and CurveGroup.
"""
from collections import namedtuple

from errors import ParameterMismatch, ZeroCoordinate
from field import modexp

CommitmentSet = namedtuple('CommitmentSet', ['params', 'commitments'])

def commit(polynomial, params):
    if polynomial.q != params.q:
        raise ParameterMismatch(f'polynomial field does not match group {params.name}')
    commitments = tuple(params.generator_power(a_i) for a_i in polynomial.coefficients)
    return CommitmentSet(params, commitments)

def check_params(commitment_set, params):
    if commitment_set.params != params:
        raise ParameterMismatch(
            f'commitments were made in group {commitment_set.params.name}, '
            f'verification requested in group {params.name}')

def public_share(x, commitment_set, params):
    check_params(commitment_set, params)
    if not commitment_set.commitments:
        raise ValueError('empty commitment set')
    q = params.q
    rhs = params.identity
    for i, C_i in enumerate(commitment_set.commitments):
        rhs = params.combine(rhs, params.scale(C_i, modexp(x, i, q)))
    return rhs

def verify(x, y, commitment_set, params):
    check_params(commitment_set, params)
    if x % params.q == 0:
        raise ZeroCoordinate('share coordinate x = 0 would expose the secret')
    # Share values are field elements; anything else cannot be f(x)
    if not 0 <= y < params.q:
        return False
    lhs = params.generator_power(y)
    rhs = public_share(x % params.q, commitment_set, params)
    return lhs == rhs

def verify_shares(shares, commitment_set, params):
    return {x: verify(x, y, commitment_set, params) for x, y in shares}
