import logging
import sys

from errors import SecretSharingError
from params import DEFAULT_GROUP, get_group
from session import DIAGNOSTIC_X, SharingSession

USAGE = '<secret> <shares> <threshold> [group]'

def run_dealer(secret, n, t, group=DEFAULT_GROUP, out=None, rng=None):
    if out is None:
        out = sys.stdout
    params = get_group(group)
    session = SharingSession(secret, n, t, params, rng)
    commitments, shares = session.run()

    print(f'Polynomial value at x={DIAGNOSTIC_X}: {session.evaluate(DIAGNOSTIC_X)}', file=out)
    print(f'Generated shares: {[tuple(share) for share in shares]}', file=out)
    print(f'Commitments ({params.name}):', file=out)
    for i, C_i in enumerate(commitments.commitments):
        print(f'  C_{i} = {params.encode(C_i)}', file=out)

    for x, is_valid in session.verify_all().items():
        y = shares[x - 1].y
        print(f'Share ({x}, {y}): {"Valid" if is_valid else "Invalid"}', file=out)

    secret = session.reconstruct(shares[:t])
    print(f'Reconstructed secret: {secret}', file=out)
    return secret

def main(argv=None):
    if argv is None:
        argv = sys.argv
    logging.basicConfig(level=logging.INFO)

    if len(argv) not in (4, 5):
        print(f'usage: {argv[0]} {USAGE}', file=sys.stderr)
        sys.exit(1)

    secret = int(argv[1])
    n = int(argv[2])
    t = int(argv[3])
    group = argv[4] if len(argv) == 5 else DEFAULT_GROUP

    try:
        run_dealer(secret, n, t, group)
    except SecretSharingError as e:
        print(f'{type(e).__name__}: {e}', file=sys.stderr)
        sys.exit(2)

if __name__ == '__main__':
    main()
