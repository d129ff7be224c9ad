from collections import namedtuple

from fastecdsa.curve import secp256k1
from fastecdsa.point import Point

G = secp256k1.G
n = secp256k1.q
infinity = Point.IDENTITY_ELEMENT

def point_add(A, B):
    return A + B

def point_mul(A, k):
    k = k % n
    if k == 0 or A == infinity:
        return infinity
    return A * k

def bytes_from_int(x: int) -> bytes:
    return x.to_bytes(32, byteorder="big")

def bytes_from_point(P: Point) -> bytes:
    return bytes_from_int(P.x)

class CurveGroup(namedtuple('CurveGroup', ['name', 'q'])):
    """secp256k1 as a commitment group: C_i = a_i * G."""
    __slots__ = ()

    identity = infinity
    secure = True

    def generator_power(self, e):
        return point_mul(G, e)

    def scale(self, element, e):
        return point_mul(element, e)

    def combine(self, a, b):
        return point_add(a, b)

    def encode(self, element):
        if element == infinity:
            return 'infinity'
        prefix = b'\x02' if element.y % 2 == 0 else b'\x03'
        return (prefix + bytes_from_point(element)).hex()

SECP256K1 = CurveGroup('secp256k1', n)
