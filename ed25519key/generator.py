import logging
import os

from cryptography.exceptions import UnsupportedAlgorithm

from . import utils
from .defs import SEED_LEN
from .errors import GenerationError
from .types import KeyMaterial

logger = logging.getLogger(__name__)


def generate(randfunc=os.urandom):
    """Generate a new Ed25519 key pair.

    randfunc is called with the number of random bytes required. Only the
    seed half of the expanded secret key is kept, as stored by PKCS8.
    """
    try:
        seed = randfunc(SEED_LEN)
    except (OSError, NotImplementedError) as e:
        raise GenerationError('entropy source unavailable (%s)' % e) from e

    if not isinstance(seed, bytes) or len(seed) != SEED_LEN:
        raise GenerationError('entropy source returned %r instead of %d bytes'
                              % (type(seed).__name__, SEED_LEN))

    try:
        public_key, secret_key = utils.seed_keypair(seed)
    except UnsupportedAlgorithm as e:
        raise GenerationError('Ed25519 is not supported (%s)' % e) from e

    logger.debug('Generated Ed25519 key pair')
    return KeyMaterial(public_key, secret_key[:SEED_LEN])
