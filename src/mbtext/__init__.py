"""mbtext — UTF-8 aware replacements for byte-oriented string primitives.

All operations work on ``bytes`` holding UTF-8 text and count in code
points, never bytes.
"""

from mbtext.core import (
    DecodeResult,
    PadType,
    all_ascii,
    decode_at,
    encode,
    from_unicode,
    is_ascii,
    ltrim,
    ord,
    rtrim,
    str_ireplace,
    str_pad,
    str_split,
    strcasecmp,
    stristr,
    strip_ascii_ctrl,
    strip_non_ascii,
    strlen,
    strpos,
    strrev,
    strrpos,
    strtolower,
    strtoupper,
    substr,
    substr_replace,
    to_unicode,
    trim,
    ucfirst,
    ucwords,
)
from mbtext.version import __version__

__all__: list[str] = [
    "DecodeResult",
    "PadType",
    "__version__",
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
