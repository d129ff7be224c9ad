from fastec import G, SECP256K1, infinity, n, point_add, point_mul

def test_point_mul_reduces_scalar():
    assert point_mul(G, n) == infinity
    assert point_mul(G, 0) == infinity
    assert point_mul(G, n + 5) == point_mul(G, 5)

def test_point_mul_identity():
    assert point_mul(infinity, 7) == infinity

def test_point_add_identity():
    P = point_mul(G, 3)
    assert point_add(P, infinity) == P
    assert point_add(infinity, P) == P
    assert point_add(infinity, infinity) == infinity

def test_curve_group_homomorphism():
    a = SECP256K1.generator_power(11)
    b = SECP256K1.generator_power(31)
    assert SECP256K1.combine(a, b) == SECP256K1.generator_power(42)
    assert SECP256K1.scale(a, 3) == SECP256K1.generator_power(33)
    assert SECP256K1.q == n
    assert SECP256K1.secure

def test_curve_group_encode():
    assert SECP256K1.encode(infinity) == 'infinity'
    encoded = SECP256K1.encode(G)
    assert len(encoded) == 66
    assert encoded == '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'

def test_point_add_matches_scalar_sum():
    assert point_add(point_mul(G, 2), point_mul(G, 5)) == point_mul(G, 7)
    assert point_add(point_mul(G, 1), point_mul(G, n - 1)) == infinity
