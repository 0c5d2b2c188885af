import re

PHONE_KEY_LENGTH = 9
_NON_DIGITS = re.compile(r"\D")


def normalize_phone(phone: str) -> str:
    """Reduce a phone number to its last 9 digits.

    "+224 620 00 00 00" and "620000000" both become "620000000", so local
    and international spellings of a Guinean number collide.
    """
    return _NON_DIGITS.sub("", phone or "")[-PHONE_KEY_LENGTH:]
