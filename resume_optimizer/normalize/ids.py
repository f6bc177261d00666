from __future__ import annotations

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_ID_CONTENT_PREFIX = 100


def _utf16_units(text: str) -> list[int]:
    encoded = text.encode("utf-16-be", errors="surrogatepass")
    return [(encoded[i] << 8) | encoded[i + 1] for i in range(0, len(encoded), 2)]


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def _rolling_hash(units: list[int]) -> int:
    """hash = hash * 31 + unit, wrapped to a signed 32-bit integer."""
    value = 0
    for unit in units:
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def generate_stable_id(text: str) -> str:
    return _to_base36(abs(_rolling_hash(_utf16_units(text))))


def generate_resume_id(file_name: str, content: str) -> str:
    # Prefix length is counted in UTF-16 code units, matching browser-side ids.
    units = _utf16_units(f"{file_name}_") + _utf16_units(content)[:_ID_CONTENT_PREFIX]
    return f"resume_{_to_base36(abs(_rolling_hash(units)))}"
