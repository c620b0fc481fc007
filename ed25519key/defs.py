import re
from enum import Enum, unique

ED25519_OID = '1.3.101.112'
X25519_OID = '1.3.101.110'

PUBLIC_KEY_LEN = 32
SEED_LEN = 32
SECRET_KEY_LEN = SEED_LEN + PUBLIC_KEY_LEN

PKCS8_VERSION = 0

PEM_BEGIN = '-----BEGIN {} KEY-----'
PEM_END = '-----END {} KEY-----'
PEM_PATTERN = re.compile(
    br'-----BEGIN (PUBLIC|PRIVATE) KEY-----\n'
    br'([^\n]+)\n'
    br'-----END \1 KEY-----\n'
)


@unique
class KEY_TYPE(Enum):
    PUBLIC = 'PUBLIC'
    PRIVATE = 'PRIVATE'

    def __str__(self):
        return '{}'.format(self.name.lower())

    @classmethod
    def from_string(cls, s):
        for name, member in cls.__members__.items():
            if s.lower() == name.lower():
                return member
        raise ValueError('Unknown key type: {}'.format(s))
