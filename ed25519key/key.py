import logging
import os

from . import asn1, generator, pem, utils
from .errors import (FileUnavailableError, MalformedDerError,
                     UnsupportedKeyTypeError)

logger = logging.getLogger(__name__)


class KeyFactory(object):
    """Create, load and serialize Ed25519 keys."""

    @staticmethod
    def generate(randfunc=os.urandom):
        return generator.generate(randfunc)

    @staticmethod
    def create_from_key(raw):
        """Load a key from PEM text, base64 encoded DER or raw DER."""
        armored = pem.unwrap(raw)
        if armored is not None:
            key_type, body = armored
            logger.debug('Loading PEM armored %s key', key_type)
            der = utils.b64decode_strict(body)
            if der is None:
                error = MalformedDerError('PEM', 'body is not valid base64')
                raise UnsupportedKeyTypeError(error) from error
        else:
            raw = utils.ensure_bytes(raw)
            der = utils.b64decode_strict(raw.strip())
            if not der:
                logger.debug('Input is not base64, treating it as DER')
                der = raw
        return asn1.decode(der)

    @classmethod
    def create_from_key_file(cls, path):
        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise FileUnavailableError(path, e.strerror or str(e)) from e
        if not content:
            raise FileUnavailableError(path)
        return cls.create_from_key(content)

    @staticmethod
    def to_der(material):
        return asn1.encode(material)

    @staticmethod
    def to_pem(material):
        return pem.wrap(material.key_type, asn1.encode(material))

    @staticmethod
    def to_public(material):
        return material.to_public()
