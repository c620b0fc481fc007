from .defs import KEY_TYPE, PEM_BEGIN, PEM_END, PEM_PATTERN
from .utils import b64encode_line


def unwrap(text):
    """Split a single PEM armored key into (KEY_TYPE, base64 body).

    Returns None if text does not have exactly the expected shape.
    """
    if isinstance(text, str):
        try:
            text = text.encode('ascii')
        except UnicodeEncodeError:
            return None
    elif not isinstance(text, (bytes, bytearray)):
        return None

    match = PEM_PATTERN.fullmatch(bytes(text))
    if match is None:
        return None
    key_type = KEY_TYPE.from_string(match.group(1).decode('ascii'))
    return key_type, match.group(2).decode('ascii')


def wrap(key_type, der):
    label = KEY_TYPE(key_type).value
    return '\n'.join([
        PEM_BEGIN.format(label),
        b64encode_line(der),
        PEM_END.format(label),
        '',
    ])
