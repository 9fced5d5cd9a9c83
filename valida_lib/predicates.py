"""
Predicate Library - Laravel-style Validation Rules

Every predicate follows the same contract:

    predicate(value, params, all_values, field_name) -> bool

- ``value``: the field's current value
- ``params``: the rule's literal parameters (always strings)
- ``all_values``: the complete value set, for cross-field rules
- ``field_name``: the name of the field being validated

Predicates are pure. "Invalid input" is reported by returning False, never
by raising. Exceptions are reserved for programmer errors (e.g. a malformed
regex pattern) and are turned into failures by the rule engine.

## Emptiness

Two primitives decide what "empty" means, and they are deliberately
different:

- ``is_empty`` is the short-circuit most rules start with. ``None``,
  ``False``, ``""``, zero and NaN are skipped, so a field is optional
  unless a presence rule is listed.
- ``is_blank`` is the presence test behind ``required``, ``filled`` and
  ``prohibited``. Only ``None``, whitespace-only strings and empty
  sequences are blank, so ``0`` and ``False`` satisfy ``required``.
"""

import ipaddress
import json
import math
import operator
import re
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Sequence
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Params = Sequence[str]
Values = Mapping[str, Any]
Predicate = Callable[[Any, Params, Values, str], bool]

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_ALPHA_RE = re.compile(r"[a-zA-Z]+")
_ALPHA_DASH_RE = re.compile(r"[a-zA-Z0-9_-]+")
_ALPHA_NUM_RE = re.compile(r"[a-zA-Z0-9]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_ULID_RE = re.compile(r"[0-7][0-9A-HJKMNP-TV-Z]{25}", re.IGNORECASE)
_MAC_RE = re.compile(r"([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}")
_HEX_COLOR_RE = re.compile(r"#?([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
_URL_SCHEME_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")
_PASSWORD_SYMBOLS = set('!@#$%^&*(),.?":{}|<>')

# Schemes that are meaningless without a host
_NETWORK_SCHEMES = ("http", "https", "ftp", "ws", "wss")

# Fallbacks tried after ISO 8601
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

# PHP-style date_format tokens -> strptime directives
_PHP_FORMAT_TOKENS = {
    "Y": "%Y",
    "y": "%y",
    "m": "%m",
    "n": "%m",
    "d": "%d",
    "j": "%d",
    "H": "%H",
    "G": "%H",
    "i": "%M",
    "s": "%S",
    "M": "%b",
    "F": "%B",
    "D": "%a",
    "l": "%A",
    "A": "%p",
}


# ---------------------------------------------------------------------------
# Shared primitives
# ---------------------------------------------------------------------------


def is_empty(value: Any) -> bool:
    """
    Falsy short-circuit shared by most predicates.

    ``None``, ``False``, ``""``, numeric zero and NaN are empty. Whitespace
    strings and empty lists are not: they still reach the rule.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if _is_number(value):
        return value == 0 or math.isnan(value)
    return False


def is_blank(value: Any) -> bool:
    """
    Presence test used by ``required`` and friends.

    ``None``, strings that are empty after stripping and empty sequences
    are blank. Numbers and booleans (including ``0`` and ``False``) are not.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def to_number(value: Any) -> Optional[float]:
    """
    Lenient numeric coercion.

    Returns a float, or None when the value is not a number. Never raises.
    Blank strings coerce to 0, as browsers do for form input.
    """
    if isinstance(value, bool):
        return float(value)
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            text = value.strip()
            if not text:
                return 0.0
            if "_" in text:
                return None
            number = float(text)
        else:
            return None
    except (ValueError, OverflowError):
        return None

    if math.isnan(number):
        return None
    return number


def as_text(value: Any) -> str:
    """Stringify a value the way it would appear in a submitted form."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(as_text(item) for item in value)
    return str(value)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date-like value into a naive UTC datetime.

    Accepts ``date``/``datetime`` objects, epoch milliseconds, ISO 8601
    strings (including a trailing ``Z``) and a handful of common formats.
    Returns None when the value cannot be understood.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif _is_number(value):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        parsed = _parse_date_text(value.strip())
        if parsed is None:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_date_text(text: str) -> Optional[datetime]:
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text[-1] in "Zz" else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _same_value(left: Any, right: Any) -> bool:
    """Strict equality: no cross-type matches except int/float."""
    if _is_number(left) and _is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _size_of(value: Any) -> Optional[float]:
    """Length for strings and sequences, the value itself for numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, list, tuple)):
        return len(value)
    if _is_number(value):
        return value
    return None


def _param(params: Params, index: int, default: Optional[str] = None) -> Optional[str]:
    return params[index] if len(params) > index else default


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return not is_blank(value)


def filled(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if value is None:
        return True
    return not is_blank(value)


def present(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return field_name in all_values or value is not None


def prohibited(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset)):
        return is_blank(value)
    return False


def nullable(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return True


def required_if(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    other = all_values.get(_param(params, 0))
    if as_text(other) == _param(params, 1, ""):
        return required(value, params, all_values, field_name)
    return True


def required_unless(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    other = as_text(all_values.get(_param(params, 0)))
    if not any(other == candidate for candidate in params[1:]):
        return required(value, params, all_values, field_name)
    return True


def required_with(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if any(not _is_missing(all_values.get(name)) for name in params):
        return required(value, params, all_values, field_name)
    return True


def required_with_all(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if all(not _is_missing(all_values.get(name)) for name in params):
        return required(value, params, all_values, field_name)
    return True


def required_without(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if any(_is_missing(all_values.get(name)) for name in params):
        return required(value, params, all_values, field_name)
    return True


def required_without_all(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if all(_is_missing(all_values.get(name)) for name in params):
        return required(value, params, all_values, field_name)
    return True


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


def string(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if value is None:
        return True
    return isinstance(value, str)


def array(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if value is None:
        return True
    return isinstance(value, (list, tuple))


def boolean(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if value is None:
        return True
    return value in (True, False, 1, 0, "1", "0", "true", "false")


def numeric(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    if isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        return False
    number = to_number(value)
    return number is not None and math.isfinite(number)


def integer(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    number = to_number(value)
    return number is not None and math.isfinite(number) and number.is_integer()


def json_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        json.loads(value if isinstance(value, str) else as_text(value))
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


def min_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    measured = _size_of(value)
    if measured is None:
        return True
    limit = to_number(_param(params, 0))
    return limit is not None and measured >= limit


def max_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    measured = _size_of(value)
    if measured is None:
        return True
    limit = to_number(_param(params, 0))
    return limit is not None and measured <= limit


def size(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    measured = _size_of(value)
    if measured is None:
        return True
    expected = to_number(_param(params, 0))
    return expected is not None and measured == expected


def between(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    """Inclusive range: numeric when the value is numeric, length otherwise."""
    if is_empty(value):
        return True
    low = to_number(_param(params, 0))
    high = to_number(_param(params, 1))
    if low is None or high is None:
        return False

    if isinstance(value, (list, tuple)):
        return low <= len(value) <= high

    number = to_number(value)
    if number is not None and math.isfinite(number):
        return low <= number <= high

    if isinstance(value, str):
        return low <= len(value) <= high
    return True


def digits(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    text = as_text(value)
    length = to_number(_param(params, 0))
    return bool(_DIGITS_RE.fullmatch(text)) and len(text) == length


def digits_between(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    text = as_text(value)
    low = to_number(_param(params, 0))
    high = to_number(_param(params, 1))
    if low is None or high is None:
        return False
    return bool(_DIGITS_RE.fullmatch(text)) and low <= len(text) <= high


def max_digits(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    count = sum(ch in "0123456789" for ch in as_text(value))
    limit = to_number(_param(params, 0))
    return limit is not None and count <= limit


def min_digits(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    count = sum(ch in "0123456789" for ch in as_text(value))
    limit = to_number(_param(params, 0))
    return limit is not None and count >= limit


def decimal(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    """``decimal:2`` for exactly two places, ``decimal:1,3`` for a range."""
    if is_empty(value):
        return True
    if not numeric(value, params, all_values, field_name):
        return False

    parts = as_text(value).strip().split(".")
    if len(parts) == 1:
        return not params or to_number(params[0]) == 0

    places = len(parts[1])
    low = to_number(_param(params, 0))
    if len(params) > 1:
        high = to_number(params[1])
        return high is not None and (low or 0) <= places <= high
    return low is not None and places == low


def multiple_of(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    number = to_number(value)
    divisor = to_number(_param(params, 0))
    if number is None or divisor is None or divisor == 0:
        return False
    if not (math.isfinite(number) and math.isfinite(divisor)):
        return False
    return math.fmod(number, divisor) == 0


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def email(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_EMAIL_RE.fullmatch(as_text(value)))


def alpha(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_ALPHA_RE.fullmatch(as_text(value)))


def alpha_dash(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_ALPHA_DASH_RE.fullmatch(as_text(value)))


def alpha_num(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_ALPHA_NUM_RE.fullmatch(as_text(value)))


def ascii_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return as_text(value).isascii()


def lowercase(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    text = as_text(value)
    return text == text.lower()


def uppercase(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    text = as_text(value)
    return text == text.upper()


def starts_with(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return as_text(value).startswith(tuple(params))


def ends_with(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return as_text(value).endswith(tuple(params))


def doesnt_start_with(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return not as_text(value).startswith(tuple(params))


def doesnt_end_with(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return not as_text(value).endswith(tuple(params))


def regex(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    # Tokens are split on commas, so put the pattern back together
    if is_empty(value):
        return True
    pattern = re.compile(",".join(params))
    return pattern.search(as_text(value)) is not None


def not_regex(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    pattern = re.compile(",".join(params))
    return pattern.search(as_text(value)) is None


def password(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    """Minimum length (default 8) plus lower, upper, digit and symbol."""
    if is_empty(value):
        return True
    text = as_text(value)
    min_length = to_number(_param(params, 0, "8"))
    if min_length is not None and len(text) < min_length:
        return False

    return (
        any(ch.islower() for ch in text)
        and any(ch.isupper() for ch in text)
        and any(ch in "0123456789" for ch in text)
        and any(ch in _PASSWORD_SYMBOLS for ch in text)
    )


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


def url(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        parsed = urlparse(as_text(value).strip())
    except ValueError:
        return False
    if not _URL_SCHEME_RE.fullmatch(parsed.scheme):
        return False
    if parsed.scheme.lower() in _NETWORK_SCHEMES:
        return bool(parsed.netloc)
    return bool(parsed.netloc or parsed.path)


def active_url(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        parsed = urlparse(as_text(value).strip())
    except ValueError:
        return False
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)


def ip(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        ipaddress.ip_address(as_text(value))
    except ValueError:
        return False
    return True


def ipv4(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        ipaddress.IPv4Address(as_text(value))
    except ValueError:
        return False
    return True


def ipv6(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        ipaddress.IPv6Address(as_text(value))
    except ValueError:
        return False
    return True


def uuid(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_UUID_RE.fullmatch(as_text(value)))


def ulid(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_ULID_RE.fullmatch(as_text(value)))


def mac_address(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_MAC_RE.fullmatch(as_text(value)))


def hex_color(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return bool(_HEX_COLOR_RE.fullmatch(as_text(value)))


def timezone_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    try:
        ZoneInfo(as_text(value))
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def date_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return parse_date(value) is not None


def _compare_dates(value: Any, params: Params, compare: Callable[[datetime, datetime], bool]) -> bool:
    if is_empty(value):
        return True
    parsed = parse_date(value)
    reference = parse_date(_param(params, 0))
    if parsed is None or reference is None:
        return False
    return compare(parsed, reference)


def before(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_dates(value, params, operator.lt)


def after(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_dates(value, params, operator.gt)


def before_or_equal(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_dates(value, params, operator.le)


def after_or_equal(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_dates(value, params, operator.ge)


def date_equals(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_dates(value, params, lambda left, right: left.date() == right.date())


def date_format(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    """Match a PHP-style format such as ``Y-m-d`` or ``d/m/Y H:i``."""
    if is_empty(value):
        return True
    if not params:
        return date_(value, params, all_values, field_name)

    directive = "".join(
        _PHP_FORMAT_TOKENS.get(ch, "%%" if ch == "%" else ch)
        for ch in ",".join(params)
    )
    try:
        datetime.strptime(as_text(value), directive)
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Choices
# ---------------------------------------------------------------------------


def in_(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return as_text(value) in params


def not_in(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return as_text(value) not in params


def accepted(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return value in ("yes", "on", "1", 1, True, "true")


def declined(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return value in ("no", "off", "0", 0, False, "false")


def accepted_if(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    other = all_values.get(_param(params, 0))
    if as_text(other) == _param(params, 1, ""):
        return accepted(value, params, all_values, field_name)
    return True


def declined_if(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    other = all_values.get(_param(params, 0))
    if as_text(other) == _param(params, 1, ""):
        return declined(value, params, all_values, field_name)
    return True


def distinct(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if not isinstance(value, (list, tuple)):
        return True
    seen = []
    for item in value:
        if any(_same_value(item, other) for other in seen):
            return False
        seen.append(item)
    return True


# ---------------------------------------------------------------------------
# Cross-field comparisons
# ---------------------------------------------------------------------------


def same(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return _same_value(value, all_values.get(_param(params, 0)))


def different(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return not _same_value(value, all_values.get(_param(params, 0)))


def confirmed(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    if is_empty(value):
        return True
    return _same_value(value, all_values.get(f"{field_name}_confirmation"))


def _compare_to_field(value: Any, params: Params, all_values: Values, compare: Callable[[float, float], bool]) -> bool:
    # A missing comparison field never blocks the value
    if is_empty(value):
        return True
    other = all_values.get(_param(params, 0))
    if other is None:
        return True
    left = to_number(value)
    right = to_number(other)
    if left is None or right is None:
        return False
    return compare(left, right)


def gt(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_to_field(value, params, all_values, operator.gt)


def gte(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_to_field(value, params, all_values, operator.ge)


def lt(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_to_field(value, params, all_values, operator.lt)


def lte(value: Any, params: Params, all_values: Values, field_name: str) -> bool:
    return _compare_to_field(value, params, all_values, operator.le)


DEFAULT_RULES: Dict[str, Predicate] = {
    "required": required,
    "email": email,
    "min": min_,
    "max": max_,
    "between": between,
    "numeric": numeric,
    "integer": integer,
    "alpha": alpha,
    "alpha_dash": alpha_dash,
    "alpha_num": alpha_num,
    "url": url,
    "same": same,
    "different": different,
    "confirmed": confirmed,
    "in": in_,
    "not_in": not_in,
    "boolean": boolean,
    "accepted": accepted,
    "declined": declined,
    "size": size,
    "digits": digits,
    "digits_between": digits_between,
    "date": date_,
    "before": before,
    "after": after,
    "before_or_equal": before_or_equal,
    "after_or_equal": after_or_equal,
    "regex": regex,
    "string": string,
    "nullable": nullable,
    "array": array,
    "starts_with": starts_with,
    "ends_with": ends_with,
    "lowercase": lowercase,
    "uppercase": uppercase,
    "ip": ip,
    "ipv4": ipv4,
    "ipv6": ipv6,
    "json": json_,
    "uuid": uuid,
    "gt": gt,
    "gte": gte,
    "lt": lt,
    "lte": lte,
    "required_if": required_if,
    "required_with": required_with,
    "required_without": required_without,
    "ulid": ulid,
    "mac_address": mac_address,
    "ascii": ascii_,
    "hex_color": hex_color,
    "password": password,
    "max_digits": max_digits,
    "min_digits": min_digits,
    "decimal": decimal,
    "multiple_of": multiple_of,
    "active_url": active_url,
    "timezone": timezone_,
    "date_equals": date_equals,
    "date_format": date_format,
    "not_regex": not_regex,
    "doesnt_start_with": doesnt_start_with,
    "doesnt_end_with": doesnt_end_with,
    "present": present,
    "filled": filled,
    "prohibited": prohibited,
    "distinct": distinct,
    "required_unless": required_unless,
    "required_with_all": required_with_all,
    "required_without_all": required_without_all,
    "accepted_if": accepted_if,
    "declined_if": declined_if,
}
