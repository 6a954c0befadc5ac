"""Tests for CommunityService."""

import pytest

from peakpulse.core.exceptions import (
    InvalidStatusException,
    NoFieldsToUpdateException,
    PostNotFoundException,
    ValidationException,
)
from peakpulse.models import PostComment, PostLike, User
from peakpulse.services.community_service import CommunityService


@pytest.fixture
def users(test_db):
    author = User(email="author@peakpulse.com", name="Pasang", hashed_password="x")
    fan = User(email="fan@peakpulse.com", hashed_password="x")
    test_db.add_all([author, fan])
    test_db.commit()
    return author, fan


@pytest.fixture
def post(users, test_db):
    author, _ = users
    post = CommunityService.create_post(
        author.id, {"image_url": "https://cdn/p.jpg", "caption": "Summit day", "product_tags": [1]}, test_db
    )
    return CommunityService.admin_update(post.id, test_db, status="approved")


class TestPosts:
    def test_new_post_pending_and_hidden_from_feed(self, users, test_db):
        author, _ = users

        post = CommunityService.create_post(author.id, {"image_url": "https://cdn/p.jpg"}, test_db)

        assert post.status == "pending"
        assert post.like_count == 0
        assert CommunityService.list_feed(test_db) == []

    def test_feed_shows_approved(self, post, test_db):
        assert CommunityService.list_feed(test_db) == [post]

    def test_serialize_with_viewer_state(self, users, post, test_db):
        author, fan = users
        CommunityService.toggle_like(post.id, fan.id, test_db)
        CommunityService.toggle_bookmark(post.id, fan.id, test_db)
        CommunityService.add_comment(post.id, fan.id, "Great shot", test_db)

        as_fan = CommunityService.serialize_posts([post], test_db, viewer_id=fan.id)[0]
        anonymous = CommunityService.serialize_posts([post], test_db)[0]

        assert as_fan["user_name"] == "Pasang"
        assert as_fan["like_count"] == 1
        assert as_fan["comment_count"] == 1
        assert as_fan["liked_by_me"] is True
        assert as_fan["bookmarked_by_me"] is True
        assert anonymous["liked_by_me"] is False
        assert anonymous["bookmarked_by_me"] is False

    def test_missing_post(self, test_db):
        with pytest.raises(PostNotFoundException):
            CommunityService.get_post(999, test_db)


class TestLikesAndBookmarks:
    def test_toggle_like(self, users, post, test_db):
        """좋아요 토글 시 like_count는 좋아요 행 개수와 일치"""
        author, fan = users

        assert CommunityService.toggle_like(post.id, fan.id, test_db) == {"liked": True, "like_count": 1}
        assert CommunityService.toggle_like(post.id, author.id, test_db) == {"liked": True, "like_count": 2}
        assert CommunityService.toggle_like(post.id, fan.id, test_db) == {"liked": False, "like_count": 1}
        assert test_db.query(PostLike).count() == 1

    def test_toggle_like_missing_post(self, users, test_db):
        with pytest.raises(PostNotFoundException):
            CommunityService.toggle_like(999, users[1].id, test_db)

    def test_toggle_bookmark_and_list(self, users, post, test_db):
        _, fan = users

        assert CommunityService.toggle_bookmark(post.id, fan.id, test_db) == {"bookmarked": True}
        assert CommunityService.list_bookmarked(fan.id, test_db) == [post]
        assert CommunityService.toggle_bookmark(post.id, fan.id, test_db) == {"bookmarked": False}
        assert CommunityService.list_bookmarked(fan.id, test_db) == []


class TestComments:
    def test_add_and_list_comments(self, users, post, test_db):
        author, fan = users
        first = CommunityService.add_comment(post.id, fan.id, "  Love it ", test_db)
        reply = CommunityService.add_comment(
            post.id, author.id, "Thanks!", test_db, parent_comment_id=first.id
        )

        comments = CommunityService.list_comments(post.id, test_db)

        assert [c.id for c in comments] == [first.id, reply.id]
        assert first.comment_text == "Love it"
        assert CommunityService.comment_to_dict(first)["user_name"] == "fan"

    def test_empty_comment(self, users, post, test_db):
        with pytest.raises(ValidationException):
            CommunityService.add_comment(post.id, users[1].id, "   ", test_db)

    def test_parent_from_other_post(self, users, post, test_db):
        author, fan = users
        other = CommunityService.create_post(author.id, {"image_url": "https://cdn/2.jpg"}, test_db)
        foreign = CommunityService.add_comment(other.id, fan.id, "Hi", test_db)

        with pytest.raises(ValidationException):
            CommunityService.add_comment(post.id, fan.id, "Reply", test_db, parent_comment_id=foreign.id)


class TestModeration:
    def test_admin_update_caption(self, post, test_db):
        updated = CommunityService.admin_update(post.id, test_db, caption="Edited")

        assert updated.caption == "Edited"
        assert updated.status == "approved"

    def test_admin_update_requires_fields(self, post, test_db):
        with pytest.raises(NoFieldsToUpdateException):
            CommunityService.admin_update(post.id, test_db)

    def test_admin_update_invalid_status(self, post, test_db):
        with pytest.raises(InvalidStatusException):
            CommunityService.admin_update(post.id, test_db, status="hidden")

    def test_list_all_by_status(self, post, test_db):
        assert CommunityService.list_all(test_db, status="approved") == [post]
        assert CommunityService.list_all(test_db, status="pending") == []

    def test_delete_post_removes_likes_and_comments(self, users, post, test_db):
        _, fan = users
        CommunityService.toggle_like(post.id, fan.id, test_db)
        CommunityService.add_comment(post.id, fan.id, "Nice", test_db)

        CommunityService.delete_post(post.id, test_db)

        assert test_db.query(PostLike).count() == 0
        assert test_db.query(PostComment).count() == 0
