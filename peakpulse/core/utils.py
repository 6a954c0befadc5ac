"""공통 유틸리티 함수."""

import re
from datetime import datetime, timezone

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w-]+")


def slugify(text: str) -> str:
    """
    이름/제목으로부터 URL slug를 생성합니다.

    소문자 변환 → 공백을 '-'로 치환 → 단어 문자와 '-' 외의 문자 제거

    Example:
        >>> slugify("Himalayan Hoodie 2.0")
        'himalayan-hoodie-20'
    """
    slug = _WHITESPACE_RE.sub("-", text.strip().lower())
    return _NON_SLUG_RE.sub("", slug)


def utcnow() -> datetime:
    """timezone 정보 없는 UTC 현재 시각 (DB 컬럼 기본값용)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def display_name(name: str | None, email: str | None, fallback: str = "Peak Pulse User") -> str:
    """
    커뮤니티/리뷰에 노출할 작성자 이름을 결정합니다.

    이름 → 이메일 로컬 파트 → 기본값 순으로 사용합니다.
    """
    if name and name.strip():
        return name.strip()
    if email and email.strip():
        return email.split("@")[0]
    return fallback


def to_naive_utc(value: datetime | None) -> datetime | None:
    """
    timezone 정보가 있는 시각을 UTC 기준 naive datetime으로 변환합니다.

    naive 값은 이미 UTC로 간주하여 그대로 반환합니다.

    Example:
        >>> to_naive_utc(datetime.fromisoformat("2025-10-01T12:00:00+05:45"))
        datetime.datetime(2025, 10, 1, 6, 15)
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def drop_required_nulls(model, updates: dict) -> dict:
    """
    NOT NULL 컬럼에 대한 None 값을 부분 수정 데이터에서 제외합니다.

    Example:
        >>> drop_required_nulls(Loan, {"loan_name": None, "notes": None})
        {'notes': None}
    """
    columns = model.__table__.columns
    return {
        field: value
        for field, value in updates.items()
        if value is not None or field not in columns or columns[field].nullable
    }
