from enum import Enum

import logging
import secrets

import polynomial as poly
import shamir
import vss
from errors import InvalidSessionState
from params import get_group

# Read-only evaluation point used for display
DIAGNOSTIC_X = 1

class SessionState(Enum):
    UNINITIALIZED = 0
    POLYNOMIAL_GENERATED = 1
    COMMITTED = 2
    SHARES_DISTRIBUTED = 3
    RECONSTRUCTED = 4

class SharingSession:
    """One dealer session: a single polynomial, its commitments and shares.

    Commit and distribute may happen in either order once the polynomial
    exists. Verification needs both. Reconstruction ends the session and
    discards the polynomial.
    Sessions share no mutable state, so independent sessions can run in
    parallel as long as each one gets its own random source.
    """

    def __init__(self, secret, n, t, params=None, rng=None):
        if params is None:
            params = get_group()
        if rng is None:
            rng = secrets.SystemRandom()

        self.secret = secret
        self.n = n
        self.t = t
        self.params = params
        self.rng = rng

        self.polynomial = None
        self.commitments = None
        self.shares = None
        self.reconstructed = False

    @property
    def state(self):
        if self.reconstructed:
            return SessionState.RECONSTRUCTED
        if self.shares is not None:
            return SessionState.SHARES_DISTRIBUTED
        if self.commitments is not None:
            return SessionState.COMMITTED
        if self.polynomial is not None:
            return SessionState.POLYNOMIAL_GENERATED
        return SessionState.UNINITIALIZED

    def require_open(self, action):
        if self.reconstructed:
            raise InvalidSessionState(f'cannot {action}: session already reconstructed')

    def require_polynomial(self, action):
        self.require_open(action)
        if self.polynomial is None:
            raise InvalidSessionState(f'cannot {action}: no polynomial generated')

    def generate_polynomial(self):
        self.require_open('generate polynomial')
        if self.polynomial is not None:
            raise InvalidSessionState('polynomial already generated for this session')
        self.polynomial = poly.generate(self.secret, self.t, self.n, self.params, self.rng)
        logging.debug(f'Generated degree {self.t - 1} polynomial in group {self.params.name}')
        return self.polynomial

    def commit(self):
        self.require_polynomial('commit')
        if self.commitments is None:
            self.commitments = vss.commit(self.polynomial, self.params)
            logging.debug(f'Published {len(self.commitments.commitments)} commitments')
        return self.commitments

    def distribute(self):
        self.require_polynomial('distribute shares')
        if self.shares is None:
            self.shares = shamir.distribute(self.polynomial, self.n)
            logging.debug(f'Distributed {self.n} shares with threshold {self.t}')
        return self.shares

    def evaluate(self, x=DIAGNOSTIC_X):
        self.require_polynomial('evaluate polynomial')
        return poly.evaluate(self.polynomial, x)

    def verify(self, share):
        self.require_open('verify share')
        if self.commitments is None:
            raise InvalidSessionState('cannot verify share: no commitments published')
        if self.shares is None:
            raise InvalidSessionState('cannot verify share: no shares distributed')
        x, y = share
        is_valid = vss.verify(x, y, self.commitments, self.params)
        if not is_valid:
            logging.info(f'Share at x = {x} is inconsistent with the published commitments')
        return is_valid

    def verify_all(self, shares=None):
        if shares is None:
            shares = self.shares
        if shares is None:
            raise InvalidSessionState('cannot verify shares: none distributed')
        return {x: self.verify((x, y)) for x, y in shares}

    def reconstruct(self, shares):
        self.require_open('reconstruct')
        if self.shares is None:
            raise InvalidSessionState('cannot reconstruct: no shares distributed')
        secret = shamir.reconstruct(shares, self.t, self.params)
        self.reconstructed = True
        self.polynomial = None
        logging.debug('Session reconstructed, polynomial discarded')
        return secret

    def run(self):
        self.generate_polynomial()
        return self.commit(), self.distribute()
