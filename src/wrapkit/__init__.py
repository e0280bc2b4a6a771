"""wrapkit: automatic object-to-dict encoding."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("wrapkit")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from wrapkit.api import wrap, wrap_many, wrap_value, try_wrap
from wrapkit.codes import WrapErrorCode
from wrapkit.contracts import WrapIssue, WrapResult
from wrapkit.kernel.customization import Variant, WrapCustomizable, WrappableKey
from wrapkit.kernel.dates import DateFormatter, IsoDateFormatter, StrftimeDateFormatter
from wrapkit.kernel.errors import (
    CyclicReferenceError,
    DateFormattingError,
    InvalidTopLevelResultError,
    KeyCollisionError,
    UnwrappableTypeError,
    WrapError,
)
from wrapkit.kernel.keys import KeyStyle
from wrapkit.kernel.leaves import ABSENT
from wrapkit.kernel.wrapper import WrapOptions

__all__ = [
    "__version__",
    "wrap",
    "wrap_many",
    "wrap_value",
    "try_wrap",
    "WrapErrorCode",
    "WrapIssue",
    "WrapResult",
    "Variant",
    "WrapCustomizable",
    "WrappableKey",
    "DateFormatter",
    "IsoDateFormatter",
    "StrftimeDateFormatter",
    "WrapError",
    "UnwrappableTypeError",
    "KeyCollisionError",
    "InvalidTopLevelResultError",
    "DateFormattingError",
    "CyclicReferenceError",
    "KeyStyle",
    "ABSENT",
    "WrapOptions",
]
