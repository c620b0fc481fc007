from .defs import ED25519_OID


class Ed25519KeyError(Exception):
    """Base class for all errors raised by this package."""


class GenerationError(Ed25519KeyError):
    def __init__(self, reason):
        super(GenerationError, self).__init__(reason)
        self.reason = reason

    def __str__(self):
        return 'Key generation failed: %s' % self.reason


class MalformedDerError(Ed25519KeyError):
    def __init__(self, schema, reason):
        super(MalformedDerError, self).__init__(schema, reason)
        self.schema = schema
        self.reason = reason

    def __str__(self):
        return 'Not a valid %s structure: %s' % (self.schema, self.reason)


class OidMismatchError(Ed25519KeyError):
    def __init__(self, actual, expected=ED25519_OID):
        super(OidMismatchError, self).__init__(actual, expected)
        self.actual = actual
        self.expected = expected

    def __str__(self):
        return 'OID must be %s, %s received' % (self.expected, self.actual)


class UnsupportedKeyTypeError(Ed25519KeyError):
    def __init__(self, cause=None):
        super(UnsupportedKeyTypeError, self).__init__(cause)
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return 'Unsupported key type'
        return 'Unsupported key type: %s' % self.cause


class FileUnavailableError(Ed25519KeyError):
    def __init__(self, path, reason='file is empty'):
        super(FileUnavailableError, self).__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self):
        return 'Key file %s is unavailable: %s' % (self.path, self.reason)
