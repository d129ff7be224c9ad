import logging

from Cryptodome.Util.number import isPrime

from errors import InvalidParameters, SecretOutOfRange
from fastec import SECP256K1
from field import FieldParameters, modexp

# RFC 3526, 2048-bit MODP group. p is a safe prime and 2 generates the
# subgroup of quadratic residues, of prime order (p - 1) / 2.
_MODP2048_P = int(
    'FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1'
    '29024E088A67CC74020BBEA63B139B22514A08798E3404DD'
    'EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245'
    'E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED'
    'EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D'
    'C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F'
    '83655D23DCA3AD961C62F356208552BB9ED529077096966D'
    '670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B'
    'E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9'
    'DE2BCBF6955817183995497CEA956AE515D2261898FA0510'
    '15728E5A8AACAA68FFFFFFFFFFFFFFFF', 16)

TOY = FieldParameters('toy', 2039, 1019, 2)
MODP2048 = FieldParameters('modp2048', _MODP2048_P, (_MODP2048_P - 1) // 2, 2)

GROUPS = {
    'toy': TOY,
    'modp2048': MODP2048,
    'secp256k1': SECP256K1,
}

DEFAULT_GROUP = 'modp2048'

def get_group(name=DEFAULT_GROUP):
    try:
        params = GROUPS[name]
    except KeyError:
        raise InvalidParameters(f'unknown group {name!r}, expected one of {", ".join(sorted(GROUPS))}') from None
    if not params.secure:
        logging.warning(f'Group {name} is illustrative only and unsafe for real secrets')
    return params

def custom_group(p, q, g, name='custom'):
    if not isPrime(p):
        raise InvalidParameters(f'p = {p} is not prime')
    if not isPrime(q):
        raise InvalidParameters(f'q = {q} is not prime')
    if (p - 1) % q != 0:
        raise InvalidParameters('q does not divide p - 1')
    if not 1 < g < p:
        raise InvalidParameters(f'g must lie in (1, p), got {g}')
    if modexp(g, q, p) != 1:
        raise InvalidParameters(f'g = {g} does not have order q')
    return FieldParameters(name, p, q, g)

def check_secret(secret, params):
    if not 0 <= secret < params.q:
        raise SecretOutOfRange(f'secret must lie in [0, {params.q}) for group {params.name}')
