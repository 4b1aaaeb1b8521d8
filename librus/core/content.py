"""Content transforms for message and notice bodies."""
import base64
from typing import Optional

# Applied in order; not a general HTML entity decoder.
ENTITIES = (
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
)


def decode_base64_text(content: str) -> Optional[str]:
    """
    Decode a base64-encoded message body to text.

    Message bodies from the messaging API are base64 encoded, but some are
    already plain text or malformed, so failure is not an error.

    Args:
        content: Standard base64 (with padding)

    Returns:
        Decoded UTF-8 text, or None if either decoding step fails
    """
    try:
        return base64.b64decode(content, validate=True).decode('utf-8')
    except ValueError:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        return None


def strip_markup(content: str) -> str:
    """
    Reduce an HTML fragment to plain text.

    Everything from '<' up to the next '>' is dropped without any
    well-formedness check, so an unterminated tag swallows the rest of the
    input. Then the fixed entity table is applied and the result trimmed.

    Args:
        content: HTML fragment (e.g. a school notice body)

    Returns:
        Plain text
    """
    out = []
    in_tag = False

    for ch in content:
        if ch == '<':
            in_tag = True
        elif ch == '>':
            in_tag = False
        elif not in_tag:
            out.append(ch)

    text = ''.join(out)
    for entity, replacement in ENTITIES:
        text = text.replace(entity, replacement)

    return text.strip()
