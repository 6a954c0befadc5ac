"""Tests for DesignService."""

from datetime import date

import pytest

from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    SlugAlreadyExistsException,
)
from peakpulse.services.design_service import DesignService


@pytest.fixture
def thangka(test_db):
    return DesignService.create_category({"name": "Thangka Art"}, test_db)


def _collab(db, title, **overrides):
    data = {"title": title, "is_published": True}
    data.update(overrides)
    return DesignService.create_collaboration(data, db)


class TestCollaborationCategories:
    def test_create_and_list(self, test_db, thangka):
        DesignService.create_category({"name": "Dhaka Weaves"}, test_db)

        assert thangka.slug == "thangka-art"
        assert [c.name for c in DesignService.list_categories(test_db)] == ["Dhaka Weaves", "Thangka Art"]

    def test_duplicate_slug(self, test_db, thangka):
        with pytest.raises(SlugAlreadyExistsException):
            DesignService.create_category({"name": "Thangka Art"}, test_db)

    def test_update_requires_fields(self, test_db, thangka):
        with pytest.raises(NoFieldsToUpdateException):
            DesignService.update_category(thangka.id, {}, test_db)

    def test_delete_detaches_collaborations(self, test_db, thangka):
        collab = _collab(test_db, "Mandala Series", category_id=thangka.id)

        DesignService.delete_category(thangka.id, test_db)
        test_db.refresh(collab)

        assert collab.category_id is None


class TestCollaborations:
    def test_published_only_listing(self, test_db):
        published = _collab(test_db, "Mandala Series")
        _collab(test_db, "Draft Drop", is_published=False)

        assert DesignService.list_collaborations(test_db) == [published]
        assert len(DesignService.list_collaborations(test_db, published_only=False)) == 2

    def test_order_by_collaboration_date(self, test_db):
        """일자 내림차순, 일자가 없는 콜라보는 마지막"""
        undated = _collab(test_db, "Undated")
        older = _collab(test_db, "Older", collaboration_date=date(2023, 5, 1))
        newer = _collab(test_db, "Newer", collaboration_date=date(2024, 9, 1))

        assert DesignService.list_collaborations(test_db) == [newer, older, undated]

    def test_get_by_slug_hides_drafts(self, test_db):
        _collab(test_db, "Draft Drop", is_published=False)

        with pytest.raises(NotFoundException):
            DesignService.get_collaboration_by_slug("draft-drop", test_db)
        assert DesignService.get_collaboration_by_slug("draft-drop", test_db, published_only=False)

    def test_unknown_category(self, test_db):
        with pytest.raises(NotFoundException):
            _collab(test_db, "Orphan", category_id=999)

    def test_update_slug_conflict(self, test_db):
        _collab(test_db, "Mandala Series")
        other = _collab(test_db, "Prayer Flags")

        with pytest.raises(SlugAlreadyExistsException):
            DesignService.update_collaboration(other.id, {"slug": "mandala-series"}, test_db)

    def test_delete_detaches_print_designs(self, test_db):
        collab = _collab(test_db, "Mandala Series")
        design = DesignService.create_print_design(
            {"title": "Mandala Tee", "image_url": "https://cdn/m.png", "price": 2500, "collaboration_id": collab.id},
            test_db,
        )

        DesignService.delete_collaboration(collab.id, test_db)
        test_db.refresh(design)

        assert design.collaboration_id is None


class TestPrintDesigns:
    def test_create_update_delete(self, test_db):
        design = DesignService.create_print_design(
            {"title": "Yeti Print", "image_url": "https://cdn/y.png", "price": 1800}, test_db
        )
        assert design.slug == "yeti-print"
        assert design.is_for_sale is True

        updated = DesignService.update_print_design(design.id, {"price": 2000, "is_for_sale": False}, test_db)
        assert (updated.price, updated.is_for_sale) == (2000, False)

        DesignService.delete_print_design(design.id, test_db)
        assert DesignService.list_print_designs(test_db) == []

    def test_update_skips_null_required_fields(self, test_db):
        design = DesignService.create_print_design(
            {"title": "Yeti Print", "image_url": "https://cdn/y.png", "price": 1800}, test_db
        )

        updated = DesignService.update_print_design(design.id, {"price": None, "title": "Yeti Print II"}, test_db)
        assert (updated.price, updated.title) == (1800, "Yeti Print II")

        with pytest.raises(NoFieldsToUpdateException):
            DesignService.update_print_design(design.id, {"price": None, "is_for_sale": None}, test_db)

    def test_unknown_collaboration(self, test_db):
        with pytest.raises(NotFoundException):
            DesignService.create_print_design(
                {"title": "Lost", "image_url": "https://cdn/l.png", "price": 1, "collaboration_id": 42},
                test_db,
            )
