"""Core layer — pure UTF-8 decoding, indexing and string operations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every public operation takes and returns code-point offsets.
"""

from mbtext.core.case import (
    str_ireplace,
    strcasecmp,
    stristr,
    strtolower,
    strtoupper,
    ucfirst,
    ucwords,
)
from mbtext.core.classifier import all_ascii, is_ascii
from mbtext.core.codec import decode_at, encode
from mbtext.core.models import DecodeResult, PadType
from mbtext.core.ops import (
    ord,
    str_split,
    strlen,
    strpos,
    strrpos,
    substr,
    substr_replace,
)
from mbtext.core.transform import (
    from_unicode,
    ltrim,
    rtrim,
    str_pad,
    strip_ascii_ctrl,
    strip_non_ascii,
    strrev,
    to_unicode,
    trim,
)

__all__: list[str] = [
    "DecodeResult",
    "PadType",
    "all_ascii",
    "decode_at",
    "encode",
    "from_unicode",
    "is_ascii",
    "ltrim",
    "ord",
    "rtrim",
    "str_ireplace",
    "str_pad",
    "str_split",
    "strcasecmp",
    "stristr",
    "strip_ascii_ctrl",
    "strip_non_ascii",
    "strlen",
    "strpos",
    "strrev",
    "strrpos",
    "strtolower",
    "strtoupper",
    "substr",
    "substr_replace",
    "to_unicode",
    "trim",
    "ucfirst",
    "ucwords",
]
