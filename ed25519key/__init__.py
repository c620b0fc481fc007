from .defs import ED25519_OID, KEY_TYPE
from .errors import (Ed25519KeyError, GenerationError, MalformedDerError,
                     OidMismatchError, UnsupportedKeyTypeError,
                     FileUnavailableError)
from .types import KeyMaterial
from .key import KeyFactory

__version__ = '1.0.0'
