from binascii import b2a_hex

from . import utils
from .defs import KEY_TYPE, PUBLIC_KEY_LEN, SEED_LEN


def _check_bytes(name, value, length):
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError('%s must be bytes, got %s' % (name, type(value).__name__))
    if len(value) != length:
        raise ValueError('%s must be exactly %d bytes, got %d' %
                         (name, length, len(value)))
    return bytes(value)


class KeyMaterial(object):
    """An Ed25519 public key with an optional private seed.

    Instances are immutable. The public key is not re-derived from the seed
    on construction, use from_seed() to build a consistent pair from a seed.
    """

    __slots__ = ('_public_key', '_private_seed')

    def __init__(self, public_key, private_seed=None):
        object.__setattr__(self, '_public_key',
                           _check_bytes('public_key', public_key, PUBLIC_KEY_LEN))
        if private_seed is not None:
            private_seed = _check_bytes('private_seed', private_seed, SEED_LEN)
        object.__setattr__(self, '_private_seed', private_seed)

    def __setattr__(self, name, value):
        raise AttributeError('KeyMaterial is immutable')

    def __delattr__(self, name):
        raise AttributeError('KeyMaterial is immutable')

    @classmethod
    def from_seed(cls, seed):
        public_key, secret_key = utils.seed_keypair(seed)
        return cls(public_key, secret_key[:SEED_LEN])

    @property
    def public_key(self):
        return self._public_key

    @property
    def private_seed(self):
        return self._private_seed

    @property
    def is_private(self):
        return self._private_seed is not None

    @property
    def key_type(self):
        return KEY_TYPE.PRIVATE if self.is_private else KEY_TYPE.PUBLIC

    def to_public(self):
        """Return a public-only view of this key"""
        if not self.is_private:
            return self
        return type(self)(self._public_key)

    def __eq__(self, other):
        if not isinstance(other, KeyMaterial):
            return NotImplemented
        return (self._public_key == other._public_key and
                self._private_seed == other._private_seed)

    def __hash__(self):
        return hash((self._public_key, self._private_seed))

    def __repr__(self):
        return '%s(public_key=%s, private=%s)' % (
            type(self).__name__,
            b2a_hex(self._public_key).decode('ascii'),
            self.is_private)
