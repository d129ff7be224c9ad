from collections import namedtuple

from errors import InvalidExponent

# Modular groups below this size are for illustration only
MIN_MODULUS_BITS = 2048

def modexp(base, exponent, modulus):
    if modulus <= 1:
        raise ValueError(f'modulus must be greater than 1, got {modulus}')
    if exponent < 0:
        raise InvalidExponent(f'negative exponent {exponent}')

    # Square-and-multiply over the bits of the exponent
    result = 1 % modulus
    base = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result

def mod_inverse(a, q):
    # Fermat's little theorem, q must be prime
    a = a % q
    if a == 0:
        raise ZeroDivisionError(f'0 has no inverse mod {q}')
    return modexp(a, q - 2, q)

class FieldParameters(namedtuple('FieldParameters', ['name', 'p', 'q', 'g'])):
    """Prime-order subgroup of Z_p^* generated by g.

    Shares and coefficients live in Z_q, commitments in the subgroup.
    """
    __slots__ = ()

    identity = 1

    @property
    def secure(self):
        return self.p.bit_length() >= MIN_MODULUS_BITS

    def generator_power(self, e):
        return modexp(self.g, e, self.p)

    def scale(self, element, e):
        return modexp(element, e, self.p)

    def combine(self, a, b):
        return a * b % self.p

    def encode(self, element):
        return str(element)
