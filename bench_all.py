from multiprocessing import Pool

import logging
import secrets
import sys
import time

from params import DEFAULT_GROUP, get_group
from session import SharingSession

T_N_PAIRS = [(3, 5), (11, 15), (34, 50), (67, 100)]

def run_session(args):
    # Each worker builds its own session and random source
    group, t, n = args
    params = get_group(group)
    secret = secrets.randbelow(params.q)
    session = SharingSession(secret, n, t, params)

    start = time.time()
    session.generate_polynomial()
    session.commit()
    committed = time.time()
    shares = session.distribute()
    distributed = time.time()
    results = session.verify_all()
    verified = time.time()
    recovered = session.reconstruct(secrets.SystemRandom().sample(shares, t))
    end = time.time()

    assert all(results.values())
    assert recovered == secret
    return committed - start, distributed - committed, verified - distributed, end - verified

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) not in (2, 3):
        print(f'usage: {sys.argv[0]} <runs_per_config> [group]', file=sys.stderr)
        sys.exit(1)

    runs_per_config = int(sys.argv[1])
    group = sys.argv[2] if len(sys.argv) == 3 else DEFAULT_GROUP

    with Pool() as pool:
        for t, n in T_N_PAIRS:
            timings = pool.map(run_session, [(group, t, n)] * runs_per_config)
            with open(f'vss_{group}_{t}_{n}.csv', 'w') as outfile:
                print('t,n,group,commit,distribute,verify,reconstruct', file=outfile)
                for row in timings:
                    print(t, n, group, *row, sep=',', file=outfile)
            logging.info(f'Finished {runs_per_config} runs for config: (t = {t}, n = {n}, group = {group})')
