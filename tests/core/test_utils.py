"""
공통 유틸리티 함수 테스트
"""

from datetime import datetime, timedelta, timezone

from peakpulse.core.utils import display_name, drop_required_nulls, slugify, to_naive_utc, utcnow
from peakpulse.models import Loan


class TestSlugify:
    def test_basic(self):
        assert slugify("Himalayan Hoodie") == "himalayan-hoodie"

    def test_strips_punctuation_and_collapses_whitespace(self):
        assert slugify("  Himalayan   Hoodie 2.0! ") == "himalayan-hoodie-20"

    def test_keeps_existing_hyphens(self):
        assert slugify("Thangka-Art Tee") == "thangka-art-tee"


class TestDisplayName:
    def test_prefers_name(self):
        assert display_name(" Jane Doe ", "jane@peakpulse.com") == "Jane Doe"

    def test_falls_back_to_email_local_part(self):
        assert display_name(None, "jane@peakpulse.com") == "jane"
        assert display_name("   ", "jane@peakpulse.com") == "jane"

    def test_falls_back_to_default(self):
        assert display_name(None, None) == "Peak Pulse User"
        assert display_name(None, "", "Anonymous") == "Anonymous"


class TestToNaiveUtc:
    def test_converts_offset_to_utc(self):
        kathmandu = timezone(timedelta(hours=5, minutes=45))

        result = to_naive_utc(datetime(2025, 10, 1, 12, 0, tzinfo=kathmandu))

        assert result == datetime(2025, 10, 1, 6, 15)
        assert result.tzinfo is None

    def test_naive_and_none_unchanged(self):
        naive = datetime(2025, 10, 1, 12, 0)

        assert to_naive_utc(naive) is naive
        assert to_naive_utc(None) is None


class TestDropRequiredNulls:
    def test_keeps_nullable_and_unknown_fields(self):
        updates = {"loan_name": None, "notes": None, "status": "Paid Off", "extra": None}

        assert drop_required_nulls(Loan, updates) == {"notes": None, "status": "Paid Off", "extra": None}

    def test_all_required_nulls_removed(self):
        assert drop_required_nulls(Loan, {"loan_name": None, "start_date": None}) == {}


def test_utcnow_is_naive():
    assert utcnow().tzinfo is None
