"""Unit tests for the admin social-post client."""

from __future__ import annotations

import typing as typ

import pytest
import requests

from npixray_pages.admin import (
    AdminAuthenticationRequired,
    SocialAdminClient,
    SocialAdminError,
    SocialPost,
    group_posts,
)

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

FEED = {
    "posts": [
        {
            "id": "state-CA",
            "category": "state",
            "label": "California",
            "twitter": "CA tweet",
            "linkedin": "CA post",
            "twitterChars": 8,
            "linkedinChars": 7,
        },
        {
            "id": "national",
            "category": "national",
            "label": "National Overview",
            "twitter": "National tweet",
            "linkedin": "National post",
        },
        {"id": "odd-1", "category": "other", "twitter": "x", "linkedin": "y"},
    ],
    "counts": {"national": 1, "states": 1, "specialties": 0},
}


def _response(mocker: MockerFixture, status: int, payload: object = None) -> typ.Any:
    response = mocker.Mock()
    response.status_code = status
    response.text = ""
    response.json.return_value = payload
    return response


def test_fetch_feed_parses_posts_and_counts(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = _response(mocker, 200, FEED)

    client = SocialAdminClient("https://example.invalid/", session=session)
    feed = client.fetch_feed()

    called_url = session.get.call_args.args[0]
    assert called_url == "https://example.invalid/api/admin/social", (
        f"expected social endpoint to be requested, got {called_url!r}"
    )
    assert [post.id for post in feed.posts] == ["state-CA", "national", "odd-1"], (
        "expected posts in payload order"
    )
    assert feed.posts[0].twitter_chars == 8, "expected provided character count"
    assert feed.posts[1].linkedin_chars == len("National post"), (
        "expected character count to fall back to the text length"
    )
    assert feed.posts[2].label == "odd-1", "expected label to fall back to the id"
    assert (feed.counts.national, feed.counts.states, feed.counts.specialties) == (
        1,
        1,
        0,
    ), f"unexpected counts {feed.counts!r}"


def test_fetch_feed_requires_authentication(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = _response(mocker, 401)

    client = SocialAdminClient("https://example.invalid", session=session)
    with pytest.raises(AdminAuthenticationRequired):
        client.fetch_feed()


@pytest.mark.parametrize("status", [403, 500])
def test_fetch_feed_wraps_error_statuses(mocker: MockerFixture, status: int) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = _response(mocker, status)

    client = SocialAdminClient("https://example.invalid", session=session)
    with pytest.raises(SocialAdminError, match=str(status)) as excinfo:
        client.fetch_feed()
    assert not isinstance(excinfo.value, AdminAuthenticationRequired), (
        "expected non-401 failures not to look like auth problems"
    )


def test_fetch_feed_wraps_transport_errors(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("boom")

    client = SocialAdminClient("https://example.invalid", session=session)
    with pytest.raises(SocialAdminError, match="boom"):
        client.fetch_feed()


def test_fetch_feed_rejects_payload_without_posts(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = _response(mocker, 200, {"error": "nope"})

    client = SocialAdminClient("https://example.invalid", session=session)
    with pytest.raises(SocialAdminError, match="posts"):
        client.fetch_feed()


def test_login_posts_password(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.post.side_effect = [
        _response(mocker, 200, {"success": True}),
        _response(mocker, 401, {"error": "Invalid password"}),
    ]

    client = SocialAdminClient("https://example.invalid", session=session)

    assert client.login("right") is True, "expected 2xx to count as success"
    assert client.login("wrong") is False, "expected 401 to count as rejection"
    first_call = session.post.call_args_list[0]
    assert first_call.args[0] == "https://example.invalid/api/admin/auth", (
        "expected auth endpoint to be requested"
    )
    assert first_call.kwargs["json"] == {"password": "right"}, (
        "expected the password in the JSON body"
    )


def test_client_rejects_empty_api_base() -> None:
    with pytest.raises(ValueError, match="cannot be empty"):
        SocialAdminClient("  ")


def test_group_posts_uses_fixed_category_order() -> None:
    """Groups come out as national, state, specialty; unknowns are dropped."""
    posts = [
        SocialPost("s1", "specialty", "Cardiology", "t", "l", 1, 1),
        SocialPost("st1", "state", "Ohio", "t", "l", 1, 1),
        SocialPost("n", "national", "National", "t", "l", 1, 1),
        SocialPost("x", "other", "Other", "t", "l", 1, 1),
    ]

    grouped = group_posts(posts)

    assert list(grouped) == ["national", "state", "specialty"], (
        f"unexpected group order {list(grouped)!r}"
    )
    assert [post.id for group in grouped.values() for post in group] == [
        "n",
        "st1",
        "s1",
    ], "expected unknown categories to be dropped"
