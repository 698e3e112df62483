"""Format predicates: email, phone, currency, postal code, id card, card number, url, numbers. No I/O.

Every predicate takes an already trimmed, non-empty string and returns a bool.
Locale-aware predicates take a locale tag such as "en-US", "US" or "any";
an unsupported locale is a non-match, never an error.
"""

from __future__ import annotations

import ipaddress
import math
import re
from urllib.parse import urlsplit

import phonenumbers
import structlog
from phonenumbers import NumberParseException, PhoneNumberType

logger = structlog.get_logger(__name__)

ANY_LOCALE = "any"

EMAIL_RE = re.compile(r"^[a-zA-Z0-9_.+-]+@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$")
HEX_COLOR_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
INTEGER_RE = re.compile(r"^[-+]?[0-9]+$")
FLOAT_RE = re.compile(r"^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$")
DECIMAL_RE = re.compile(r"^[-+]?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)$")
HOSTNAME_RE = re.compile(r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$", re.IGNORECASE)
# Digits and the usual separators; keeps vanity numbers ("1-800-FLOWERS") out
PHONE_CHARS_RE = re.compile(r"^\+?[0-9\s\-().]+$")
CARD_SEPARATORS_RE = re.compile(r"[\s-]")

URL_SCHEMES = frozenset({"http", "https", "ftp"})
MAX_URL_LENGTH = 2083
MAX_EMAIL_LENGTH = 254

# Regions tried, in order, when a phone number without a country code is checked for locale "any"
ANY_PHONE_REGIONS = ("US", "GB", "IN", "DE", "FR", "IT", "ES", "BR", "CA", "AU", "CN", "JP", "MX", "NL")
MOBILE_TYPES = frozenset({PhoneNumberType.MOBILE, PhoneNumberType.FIXED_LINE_OR_MOBILE})

_FOUR_DIGIT = re.compile(r"^\d{4}$")
_FIVE_DIGIT = re.compile(r"^\d{5}$")
_SIX_DIGIT = re.compile(r"^\d{6}$")

POSTAL_CODE_PATTERNS: dict[str, re.Pattern[str]] = {
    "AT": _FOUR_DIGIT,
    "AU": _FOUR_DIGIT,
    "BE": _FOUR_DIGIT,
    "BG": _FOUR_DIGIT,
    "BR": re.compile(r"^\d{5}-?\d{3}$"),
    "CA": re.compile(r"^[ABCEGHJKLMNPRSTVXY]\d[ABCEGHJ-NPRSTV-Z][\s-]?\d[ABCEGHJ-NPRSTV-Z]\d$", re.IGNORECASE),
    "CH": _FOUR_DIGIT,
    "CN": re.compile(r"^(0[1-7]|1[012356]|2[0-7]|3[0-6]|4[0-7]|5[1-7]|6[1-7]|7[1-5]|8[1345]|9[09])\d{4}$"),
    "CZ": re.compile(r"^\d{3}\s?\d{2}$"),
    "DE": _FIVE_DIGIT,
    "DK": _FOUR_DIGIT,
    "ES": re.compile(r"^(5[0-2]|[0-4]\d)\d{3}$"),
    "FI": _FIVE_DIGIT,
    "FR": re.compile(r"^\d{2}\s?\d{3}$"),
    "GB": re.compile(r"^(gir\s?0aa|[a-z]{1,2}\d[\da-z]?\s?(\d[a-z]{2})?)$", re.IGNORECASE),
    "GR": re.compile(r"^\d{3}\s?\d{2}$"),
    "HU": _FOUR_DIGIT,
    "IL": re.compile(r"^(\d{5}|\d{7})$"),
    "IN": re.compile(r"^((?!10|29|35|54|55|65|66|86|87|88|89)[1-9][0-9]{5})$"),
    "IT": _FIVE_DIGIT,
    "JP": re.compile(r"^\d{3}-\d{4}$"),
    "MX": _FIVE_DIGIT,
    "NL": re.compile(r"^\d{4}\s?[a-z]{2}$", re.IGNORECASE),
    "NO": _FOUR_DIGIT,
    "NZ": _FOUR_DIGIT,
    "PL": re.compile(r"^\d{2}-\d{3}$"),
    "PT": re.compile(r"^\d{4}-\d{3}$"),
    "RO": _SIX_DIGIT,
    "RU": _SIX_DIGIT,
    "SE": re.compile(r"^[1-9]\d{2}\s?\d{2}$"),
    "SK": re.compile(r"^\d{3}\s?\d{2}$"),
    "US": re.compile(r"^\d{5}(-\d{4})?$"),
    "ZA": _FOUR_DIGIT,
}

_DNI_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"
_DNI_RE = re.compile(r"^[0-9XYZ][0-9]{7}[TRWAGMYFPDXBNJZSQVHLCKE]$")
_IT_CIE_RE = re.compile(r"^C[A-Z][0-9]{5}[A-Z]{2}$")
_AADHAAR_RE = re.compile(r"^[2-9][0-9]{3} ?[0-9]{4} ?[0-9]{4}$")
_NO_WEIGHTS_1 = (3, 7, 6, 1, 8, 9, 4, 5, 2)
_NO_WEIGHTS_2 = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

# Verhoeff dihedral group tables
_VERHOEFF_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)
_VERHOEFF_P = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 2, 4, 1),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)


def locale_region(locale: str | None) -> str | None:
    """Region part of a locale tag ("en-US" -> "US"). None means any region."""
    if locale is None:
        return None
    tag = locale.strip()
    if not tag or tag.lower() == ANY_LOCALE:
        return None
    return re.split(r"[-_]", tag)[-1].upper()


# --- Plain syntax checks ---


def is_email(value: str) -> bool:
    if len(value) > MAX_EMAIL_LENGTH or not EMAIL_RE.match(value):
        return False
    local = value.split("@", 1)[0]
    return not (local.startswith(".") or local.endswith(".") or ".." in local)


def is_hex_color(value: str) -> bool:
    return bool(HEX_COLOR_RE.match(value))


def is_numeric(value: str) -> bool:
    """Optional sign followed by ASCII digits only."""
    return bool(INTEGER_RE.match(value))


def _is_finite_number(value: str) -> bool:
    # ASCII only; float() also takes digit-group underscores and other scripts' digits
    if not value.isascii() or "_" in value:
        return False
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def is_float(value: str) -> bool:
    """Float syntax (exponent allowed), or anything float() reads as a finite number."""
    return bool(FLOAT_RE.match(value)) or _is_finite_number(value)


def is_decimal(value: str) -> bool:
    """Plain decimal syntax, or anything float() reads as a finite number."""
    return bool(DECIMAL_RE.match(value)) or _is_finite_number(value)


def is_alpha(value: str) -> bool:
    """ASCII letters only."""
    return value.isascii() and value.isalpha()


def is_alphanumeric(value: str) -> bool:
    return value.isascii() and value.isalnum()


def is_credit_card(value: str) -> bool:
    """13-19 digits (spaces and dashes ignored) passing the Luhn check."""
    digits = CARD_SEPARATORS_RE.sub("", value)
    if not digits.isascii() or not digits.isdigit() or not 13 <= len(digits) <= 19:
        return False
    total = 0
    for i, ch in enumerate(reversed(digits)):
        n = int(ch)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def is_url(value: str) -> bool:
    """http/https/ftp URL; scheme optional; host must carry a TLD or be an IP address."""
    if len(value) > MAX_URL_LENGTH or any(ch.isspace() for ch in value):
        return False
    candidate = value if "://" in value else f"http://{value}"
    try:
        parts = urlsplit(candidate)
        host = parts.hostname
        parts.port  # raises ValueError when out of range
    except ValueError:
        return False
    if parts.scheme.lower() not in URL_SCHEMES or not host:
        return False
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    return bool(HOSTNAME_RE.match(host))


def is_currency(value: str, symbol: str | None = None) -> bool:
    """
    Currency amount: optional leading minus, symbol, "," thousands groups, two decimals.
    A configured symbol is required; without one a "$" is accepted but optional.
    """
    if symbol:
        symbol_part = re.escape(symbol)
    else:
        symbol_part = r"\$?"
    amount = r"(?:0|[1-9]\d{0,2}(?:,\d{3})+|[1-9]\d*)(?:\.\d{2})?"
    return re.fullmatch(rf"-?{symbol_part}{amount}", value) is not None


# --- Locale-aware checks ---


def is_mobile_phone(value: str, locale: str = ANY_LOCALE) -> bool:
    """Mobile number for the locale's region; "any" accepts +CC numbers or a known region's format."""
    if not PHONE_CHARS_RE.match(value):
        return False
    region = locale_region(locale)
    if region is None:
        regions: tuple[str | None, ...] = (None, *ANY_PHONE_REGIONS)
    elif region in phonenumbers.SUPPORTED_REGIONS:
        regions = (region,)
    else:
        logger.debug("unsupported_locale", predicate="phone", locale=locale)
        return False

    for r in regions:
        try:
            number = phonenumbers.parse(value, r)
        except NumberParseException:
            continue
        if phonenumbers.is_valid_number(number) and phonenumbers.number_type(number) in MOBILE_TYPES:
            return True
    return False


def is_postal_code(value: str, locale: str = ANY_LOCALE) -> bool:
    region = locale_region(locale)
    if region is None:
        return any(p.match(value) for p in POSTAL_CODE_PATTERNS.values())
    pattern = POSTAL_CODE_PATTERNS.get(region)
    if pattern is None:
        logger.debug("unsupported_locale", predicate="postal_code", locale=locale)
        return False
    return bool(pattern.match(value))


def _es_identity_card(value: str) -> bool:
    """DNI / NIE with control letter."""
    v = value.upper()
    if not _DNI_RE.match(v):
        return False
    number = "XYZ".index(v[0]) if v[0] in "XYZ" else None
    digits = (str(number) + v[1:8]) if number is not None else v[:8]
    return _DNI_LETTERS[int(digits) % 23] == v[8]


def _it_identity_card(value: str) -> bool:
    """Carta d'identita elettronica."""
    v = value.upper()
    return v != "CA00000AA" and bool(_IT_CIE_RE.match(v))


def _no_identity_card(value: str) -> bool:
    """Fodselsnummer: 11 digits, two mod-11 control digits."""
    if len(value) != 11 or not value.isascii() or not value.isdigit():
        return False
    d = [int(c) for c in value]
    k1 = (11 - sum(w * x for w, x in zip(_NO_WEIGHTS_1, d)) % 11) % 11
    k2 = (11 - sum(w * x for w, x in zip(_NO_WEIGHTS_2, d[:9] + [k1])) % 11) % 11
    return k1 == d[9] and k2 == d[10]


def _in_identity_card(value: str) -> bool:
    """Aadhaar: 12 digits, Verhoeff checksum."""
    if not _AADHAAR_RE.match(value):
        return False
    c = 0
    for i, ch in enumerate(reversed(value.replace(" ", ""))):
        c = _VERHOEFF_D[c][_VERHOEFF_P[i % 8][int(ch)]]
    return c == 0


IDENTITY_CARD_CHECKS = {
    "ES": _es_identity_card,
    "IT": _it_identity_card,
    "NO": _no_identity_card,
    "IN": _in_identity_card,
}


def is_identity_card(value: str, locale: str = ANY_LOCALE) -> bool:
    region = locale_region(locale)
    if region is None:
        return any(check(value) for check in IDENTITY_CARD_CHECKS.values())
    check = IDENTITY_CARD_CHECKS.get(region)
    if check is None:
        logger.debug("unsupported_locale", predicate="identity_card", locale=locale)
        return False
    return check(value)
