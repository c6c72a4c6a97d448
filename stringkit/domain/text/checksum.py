"""Checksum Validation Module"""


def luhn_valid(text: str | None) -> bool:
    """Validate *text* with the Luhn (mod 10) checksum.

    Whitespace and hyphens are separators; any other non-digit character
    makes the whole input invalid.
    """
    if not text or text.isspace():
        return False

    total = 0
    double = False
    for ch in reversed(text):
        if ch == '-' or ch.isspace():
            continue

        if not '0' <= ch <= '9':
            return False

        digit = ord(ch) - 48
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9

        total += digit
        double = not double

    return total > 0 and total % 10 == 0
