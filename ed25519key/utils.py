import base64
import binascii

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from .defs import PUBLIC_KEY_LEN, SEED_LEN


def seed_keypair(seed):
    """Derive (public_key, secret_key) from a 32 byte seed.

    The secret key uses the libsodium layout, seed || public_key.
    """
    if len(seed) != SEED_LEN:
        raise ValueError('Seed must be exactly %d bytes' % SEED_LEN)
    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
    public_key = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw)
    if len(public_key) != PUBLIC_KEY_LEN:
        raise ValueError('Derived public key has wrong length')
    return public_key, bytes(seed) + public_key


def ensure_bytes(data):
    if isinstance(data, str):
        data = data.encode('utf-8')
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('Expected bytes or str, got %s' % type(data).__name__)
    return bytes(data)


def b64decode_strict(data):
    """Decode base64, returning None if data is not valid base64"""
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return None


def b64encode_line(data):
    return base64.b64encode(data).decode('ascii')
