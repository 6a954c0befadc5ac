"""카드 결제 정보 검증 테스트"""

from peakpulse.services.payment_validation import is_valid_cvc, is_valid_expiry, luhn_check


def test_luhn_check():
    assert luhn_check("4242 4242 4242 4242") is True
    assert luhn_check("4242-4242-4242-4242") is True
    assert luhn_check("4242 4242 4242 4241") is False


def test_luhn_check_length():
    """13자리 미만이나 19자리 초과는 실패"""
    assert luhn_check("0") is False
    assert luhn_check("4" * 20) is False


def test_expiry_format():
    assert is_valid_expiry("12/29") is True
    assert is_valid_expiry("0129") is True
    assert is_valid_expiry(" 01/29 ") is True
    assert is_valid_expiry("13/29") is False
    assert is_valid_expiry("1/29") is False


def test_cvc_format():
    assert is_valid_cvc("123") is True
    assert is_valid_cvc("1234") is True
    assert is_valid_cvc("12") is False
    assert is_valid_cvc("12a") is False
