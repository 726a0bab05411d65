# tests/services/test_post_service.py
"""Tests for listing, creating, editing and deleting posts."""

import pytest

from teamboard.core.settings import AddPermissionMode
from teamboard.models import Post
from teamboard.services.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from teamboard.services.markdown import markdown_to_html
from tests.conftest import ALICE, BOB, CAROL


def _count_posts(db_session) -> int:
    return db_session.query(Post).count()


def test_add_creates_unedited_post(service, discussion) -> None:
    post = service.add(content="hello", user_id=ALICE, discussion_id=discussion.id)

    assert post.content == "hello"
    assert post.created_user_id == ALICE
    assert post.discussion_id == discussion.id
    assert post.is_edited is False
    assert post.last_updated_at is None
    assert "<p>hello</p>" in post.html_content


def test_add_renders_html_from_content(service, discussion) -> None:
    content = "see [docs](https://example.com)\nthanks"
    post = service.add(content=content, user_id=ALICE, discussion_id=discussion.id)

    assert post.html_content == markdown_to_html(content)


def test_add_with_empty_content_creates_nothing(service, db_session, discussion) -> None:
    with pytest.raises(InvalidInputError):
        service.add(content="", user_id=ALICE, discussion_id=discussion.id)

    assert _count_posts(db_session) == 0


def test_add_to_missing_discussion(service) -> None:
    with pytest.raises(NotFoundError):
        service.add(content="hello", user_id=ALICE, discussion_id="nope")


def test_legacy_add_skips_membership_check(service, discussion) -> None:
    post = service.add(content="drive-by", user_id=CAROL, discussion_id=discussion.id)
    assert post.created_user_id == CAROL


def test_strict_add_requires_membership(make_service, db_session, discussion) -> None:
    service = make_service(AddPermissionMode.STRICT)

    with pytest.raises(PermissionDeniedError):
        service.add(content="drive-by", user_id=CAROL, discussion_id=discussion.id)
    assert _count_posts(db_session) == 0

    post = service.add(content="welcome", user_id=BOB, discussion_id=discussion.id)
    assert post.created_user_id == BOB


def test_get_list_is_ordered_and_scoped(service, make_discussion, team, discussion) -> None:
    other = make_discussion(team, ALICE, BOB)
    first = service.add(content="one", user_id=ALICE, discussion_id=discussion.id)
    service.add(content="elsewhere", user_id=ALICE, discussion_id=other.id)
    second = service.add(content="two", user_id=BOB, discussion_id=discussion.id)
    third = service.add(content="three", user_id=ALICE, discussion_id=discussion.id)

    posts = service.get_list(user_id=BOB, discussion_id=discussion.id)

    assert [p.id for p in posts] == [first.id, second.id, third.id]
    assert all(p.discussion_id == discussion.id for p in posts)


def test_get_list_requires_membership(service, discussion) -> None:
    service.add(content="secret", user_id=ALICE, discussion_id=discussion.id)

    with pytest.raises(PermissionDeniedError):
        service.get_list(user_id=CAROL, discussion_id=discussion.id)


def test_edit_updates_content_and_marks_edited(service, discussion) -> None:
    post = service.add(content="hello", user_id=ALICE, discussion_id=discussion.id)

    edited = service.edit(content="hello **world**", user_id=ALICE, id=post.id)

    assert edited.id == post.id
    assert edited.content == "hello **world**"
    assert edited.html_content == markdown_to_html("hello **world**")
    assert edited.is_edited is True
    assert edited.last_updated_at is not None


def test_repeated_edits_advance_last_updated(service, discussion) -> None:
    post = service.add(content="v1", user_id=ALICE, discussion_id=discussion.id)

    first = service.edit(content="v2", user_id=ALICE, id=post.id)
    second = service.edit(content="v3", user_id=ALICE, id=post.id)

    assert second.is_edited is True
    assert second.last_updated_at > first.last_updated_at


def test_edit_by_non_author_is_denied(service, discussion) -> None:
    post = service.add(content="hello", user_id=ALICE, discussion_id=discussion.id)

    with pytest.raises(PermissionDeniedError):
        service.edit(content="x", user_id=BOB, id=post.id)

    assert service.get_list(user_id=ALICE, discussion_id=discussion.id)[0].content == "hello"


def test_edit_by_author_outside_team_is_denied(service, make_team, make_discussion) -> None:
    team = make_team(BOB)
    discussion = make_discussion(team, BOB, CAROL)
    post = service.add(content="hello", user_id=CAROL, discussion_id=discussion.id)

    with pytest.raises(PermissionDeniedError):
        service.edit(content="x", user_id=CAROL, id=post.id)


@pytest.mark.parametrize("content, post_id", [("", "abc"), ("x", "")])
def test_edit_requires_content_and_id(service, content, post_id) -> None:
    with pytest.raises(InvalidInputError):
        service.edit(content=content, user_id=ALICE, id=post_id)


def test_edit_missing_post(service) -> None:
    with pytest.raises(NotFoundError, match="Post not found"):
        service.edit(content="x", user_id=ALICE, id="missing")


def test_delete_removes_post(service, db_session, discussion) -> None:
    post = service.add(content="bye", user_id=ALICE, discussion_id=discussion.id)

    assert service.delete(user_id=ALICE, id=post.id) is None
    assert _count_posts(db_session) == 0


def test_delete_by_non_author_is_denied(service, db_session, discussion) -> None:
    post = service.add(content="keep", user_id=ALICE, discussion_id=discussion.id)

    with pytest.raises(PermissionDeniedError):
        service.delete(user_id=BOB, id=post.id)

    assert _count_posts(db_session) == 1


def test_delete_requires_id(service) -> None:
    with pytest.raises(InvalidInputError):
        service.delete(user_id=ALICE, id="")


def test_delete_missing_post(service) -> None:
    with pytest.raises(NotFoundError):
        service.delete(user_id=ALICE, id="missing")
