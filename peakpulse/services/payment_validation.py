"""카드 결제 정보 검증 함수."""

import re

_EXPIRY_RE = re.compile(r"^(0[1-9]|1[0-2])/?([0-9]{2})$")
_CVC_RE = re.compile(r"^\d{3,4}$")


def luhn_check(card_number: str) -> bool:
    """
    Luhn 알고리즘으로 카드 번호를 검증합니다.

    숫자 이외의 문자는 제거하며, 13~19자리가 아니면 실패입니다.

    Example:
        >>> luhn_check("4242 4242 4242 4242")
        True
        >>> luhn_check("4242 4242 4242 4241")
        False
    """
    digits = re.sub(r"\D", "", card_number)
    if len(digits) < 13 or len(digits) > 19:
        return False

    total = 0
    for index, char in enumerate(reversed(digits)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_expiry(expiry: str) -> bool:
    """MM/YY 또는 MMYY 형식인지 확인합니다."""
    return bool(_EXPIRY_RE.match(expiry.strip()))


def is_valid_cvc(cvc: str) -> bool:
    return bool(_CVC_RE.match(cvc.strip()))
