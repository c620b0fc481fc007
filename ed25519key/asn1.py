"""DER codec for RFC 8410 Ed25519 keys.

Public keys are stored as SubjectPublicKeyInfo:

    SEQUENCE {
        SEQUENCE { OBJECT IDENTIFIER 1.3.101.112 }
        BIT STRING public_key
    }

Private keys are stored as PKCS8 PrivateKeyInfo, where the private key
OCTET STRING wraps a second DER encoded OCTET STRING holding the seed:

    SEQUENCE {
        INTEGER 0
        SEQUENCE { OBJECT IDENTIFIER 1.3.101.112 }
        OCTET STRING { OCTET STRING seed }
    }
"""

import logging
from collections import namedtuple

from asn1crypto import core
from cryptography.exceptions import UnsupportedAlgorithm

from . import utils
from .defs import ED25519_OID, PKCS8_VERSION, PUBLIC_KEY_LEN, SEED_LEN
from .errors import MalformedDerError, OidMismatchError, UnsupportedKeyTypeError
from .types import KeyMaterial

logger = logging.getLogger(__name__)

# asn1crypto reports malformed input with these
_PARSE_ERRORS = (ValueError, TypeError, KeyError, IndexError,
                 OverflowError)


class AlgorithmIdentifier(core.Sequence):
    _fields = [
        ('algorithm', core.ObjectIdentifier),
    ]


class SubjectPublicKeyInfo(core.Sequence):
    _fields = [
        ('algorithm', AlgorithmIdentifier),
        ('public_key', core.OctetBitString),
    ]


class PrivateKeyInfo(core.Sequence):
    _fields = [
        ('version', core.Integer),
        ('private_key_algorithm', AlgorithmIdentifier),
        ('private_key', core.OctetString),
    ]


class CurvePrivateKey(core.OctetString):
    pass


class SchemaMatch(namedtuple('SchemaMatch', ['material', 'error'])):
    """Outcome of matching DER against one schema, either material or error"""

    @classmethod
    def success(cls, material):
        return cls(material, None)

    @classmethod
    def failure(cls, error):
        return cls(None, error)

    @property
    def ok(self):
        return self.error is None


def _check_oid(algorithm):
    oid = algorithm['algorithm'].dotted
    if oid != ED25519_OID:
        return OidMismatchError(oid)
    return None


def _canonical(schema, der, material):
    # Extra fields, parameters and BER lengths all re-encode differently
    if encode(material) != der:
        return SchemaMatch.failure(
            MalformedDerError(schema, 'not canonical DER'))
    return SchemaMatch.success(material)


def match_public_key(der):
    """Match DER against SubjectPublicKeyInfo."""
    try:
        info = SubjectPublicKeyInfo.load(der, strict=True)
        algorithm = info['algorithm']
        oid_error = _check_oid(algorithm)
        bit_string = info['public_key']
        unused_bits = bit_string.unused_bits
        public_key = bit_string.native
    except _PARSE_ERRORS as e:
        return SchemaMatch.failure(
            MalformedDerError('SubjectPublicKeyInfo', e))

    if oid_error is not None:
        return SchemaMatch.failure(oid_error)
    if unused_bits:
        return SchemaMatch.failure(MalformedDerError(
            'SubjectPublicKeyInfo', 'BIT STRING has unused bits'))
    if public_key is None or len(public_key) != PUBLIC_KEY_LEN:
        return SchemaMatch.failure(MalformedDerError(
            'SubjectPublicKeyInfo',
            'public key must be %d bytes' % PUBLIC_KEY_LEN))
    return _canonical('SubjectPublicKeyInfo', der, KeyMaterial(public_key))


def match_private_key(der):
    """Match DER against PKCS8 PrivateKeyInfo."""
    try:
        info = PrivateKeyInfo.load(der, strict=True)
        version = info['version'].native
        algorithm = info['private_key_algorithm']
        oid_error = _check_oid(algorithm)
        seed = CurvePrivateKey.load(info['private_key'].native,
                                    strict=True).native
    except _PARSE_ERRORS as e:
        return SchemaMatch.failure(MalformedDerError('PrivateKeyInfo', e))

    if version != PKCS8_VERSION:
        return SchemaMatch.failure(MalformedDerError(
            'PrivateKeyInfo', 'unsupported version %r' % version))
    if oid_error is not None:
        return SchemaMatch.failure(oid_error)
    if seed is None or len(seed) != SEED_LEN:
        return SchemaMatch.failure(MalformedDerError(
            'PrivateKeyInfo', 'seed must be %d bytes' % SEED_LEN))

    try:
        public_key, secret_key = utils.seed_keypair(seed)
    except UnsupportedAlgorithm as e:
        raise UnsupportedKeyTypeError(e) from e
    material = KeyMaterial(public_key, secret_key[:SEED_LEN])
    return _canonical('PrivateKeyInfo', der, material)


SCHEMAS = (match_public_key, match_private_key)


def decode(der):
    """Decode DER bytes holding either an Ed25519 public or private key."""
    der = bytes(der)
    error = None
    for matcher in SCHEMAS:
        result = matcher(der)
        if result.ok:
            return result.material
        logger.debug('%s did not match: %s', matcher.__name__, result.error)
        # An OID mismatch says more than a later structural failure
        if not (isinstance(error, OidMismatchError) and
                isinstance(result.error, MalformedDerError)):
            error = result.error
    raise UnsupportedKeyTypeError(error) from error


def encode(material):
    algorithm = AlgorithmIdentifier({'algorithm': ED25519_OID})
    if material.is_private:
        seed = CurvePrivateKey(material.private_seed)
        info = PrivateKeyInfo({
            'version': PKCS8_VERSION,
            'private_key_algorithm': algorithm,
            'private_key': seed.dump(),
        })
    else:
        info = SubjectPublicKeyInfo({
            'algorithm': algorithm,
            'public_key': material.public_key,
        })
    return info.dump()
