"""Number parsing and colour packing helpers."""

_SIGNS = "+-"


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_float(text: str) -> float:
    """Parse a leading decimal number from ``text``.

    An optional sign, digits, and an optional fractional part are read.
    Parsing stops at the first character that does not fit, and an empty
    or non-numeric prefix gives ``0.0``.
    """
    sign = 1.0
    rest = text
    if rest[:1] in _SIGNS and rest[:1]:
        if rest[0] == "-":
            sign = -1.0
        rest = rest[1:]

    result = 0.0
    position = 0
    while position < len(rest) and _is_ascii_digit(rest[position]):
        result = result * 10.0 + (ord(rest[position]) - ord("0"))
        position += 1

    if rest[position:position + 1] == ".":
        frac = 0.1
        for char in rest[position + 1:]:
            if not _is_ascii_digit(char):
                break
            result += (ord(char) - ord("0")) * frac
            frac *= 0.1

    return result * sign


def is_valid_number(text: str | None) -> bool:
    """Return True if ``text`` is a plain decimal number.

    Accepted: an optional sign, then digits with at most one dot, with at
    least one digit somewhere.  No exponents, spaces or other characters.
    """
    if not text:
        return False
    body = text[1:] if text[0] in _SIGNS else text
    if any(char != "." and not _is_ascii_digit(char) for char in body):
        return False
    return body.count(".") <= 1 and any(_is_ascii_digit(c) for c in body)


def create_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a 0xRRGGBB integer."""
    return ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)