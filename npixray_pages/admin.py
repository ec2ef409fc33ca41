r"""Client for the password-gated admin social-post endpoint.

The admin dashboard is an external collaborator: the site serves
``GET /api/admin/social`` behind a cookie set by ``POST /api/admin/auth``.
This module wraps those two calls, normalises the JSON payload into
dataclasses, and groups posts the way the dashboard lists them.

Example
-------
>>> from npixray_pages.admin import SocialAdminClient
>>> client = SocialAdminClient("https://npixray.com")  # doctest: +SKIP
>>> client.login("changeme")  # doctest: +SKIP
True
>>> feed = client.fetch_feed()  # doctest: +SKIP
>>> feed.counts.national  # doctest: +SKIP
1
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from http import HTTPStatus

import requests

if typ.TYPE_CHECKING:
    import collections.abc as cabc

SOCIAL_PATH = "/api/admin/social"
AUTH_PATH = "/api/admin/auth"
POST_CATEGORIES: tuple[str, ...] = ("national", "state", "specialty")


class SocialAdminError(RuntimeError):
    """Raised when the admin endpoint is unreachable or answers unexpectedly."""


class AdminAuthenticationRequired(SocialAdminError):
    """Raised when the admin endpoint rejects the request with HTTP 401."""


@dc.dataclass(slots=True, frozen=True)
class SocialPost:
    """Pre-written social copy for one state, specialty or national report.

    Attributes
    ----------
    id : str
        Stable identifier such as ``state-CA`` or ``national``.
    category : str
        One of ``national``, ``state`` or ``specialty``.
    label : str
        Human-readable subject of the post.
    twitter : str
        Short-form post text.
    linkedin : str
        Long-form post text.
    twitter_chars : int
        Character count of ``twitter``.
    linkedin_chars : int
        Character count of ``linkedin``.
    """

    id: str
    category: str
    label: str
    twitter: str
    linkedin: str
    twitter_chars: int
    linkedin_chars: int


@dc.dataclass(slots=True, frozen=True)
class SocialCounts:
    """Number of posts generated per category."""

    national: int = 0
    states: int = 0
    specialties: int = 0


@dc.dataclass(slots=True, frozen=True)
class SocialFeed:
    """Decoded response of the social-post endpoint."""

    posts: tuple[SocialPost, ...]
    counts: SocialCounts


class SocialAdminClient:
    """Thin wrapper around the admin social and auth endpoints.

    The underlying ``requests.Session`` keeps the auth cookie, so a
    successful :meth:`login` authorises later :meth:`fetch_feed` calls made
    through the same client. Requests are not retried.
    """

    def __init__(
        self,
        api_base: str,
        *,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        normalized = api_base.strip().rstrip("/")
        if not normalized:
            msg = "Admin API base URL cannot be empty"
            raise ValueError(msg)
        self._api_base = normalized
        self._session = session or requests.Session()
        self.timeout = timeout
        self._headers = {
            "Accept": "application/json",
            "User-Agent": "npixray-pages/0.1",
        }

    def login(self, password: str) -> bool:
        """Exchange ``password`` for an admin session cookie.

        Returns
        -------
        bool
            ``True`` when the endpoint accepted the password, ``False`` when it
            answered HTTP 401.

        Raises
        ------
        SocialAdminError
            On transport failures or any other error status.
        """
        url = f"{self._api_base}{AUTH_PATH}"
        try:
            response = self._session.post(
                url,
                json={"password": password},
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            msg = f"Failed to reach admin auth endpoint: {exc}"
            raise SocialAdminError(msg) from exc

        if response.status_code == HTTPStatus.UNAUTHORIZED:
            return False
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            msg = (
                f"Admin login failed with status {response.status_code}: "
                f"{response.text[:200]}"
            )
            raise SocialAdminError(msg)
        return True

    def fetch_feed(self) -> SocialFeed:
        """Return every social post currently offered by the admin endpoint.

        Raises
        ------
        AdminAuthenticationRequired
            If the session is not authenticated.
        SocialAdminError
            On transport failures, error statuses, or a malformed payload.
        """
        url = f"{self._api_base}{SOCIAL_PATH}"
        try:
            response = self._session.get(
                url, headers=self._headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            msg = f"Failed to reach admin social endpoint: {exc}"
            raise SocialAdminError(msg) from exc

        if response.status_code == HTTPStatus.UNAUTHORIZED:
            msg = "Admin social endpoint requires authentication"
            raise AdminAuthenticationRequired(msg)
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            msg = (
                f"Admin social feed failed with status {response.status_code}: "
                f"{response.text[:200]}"
            )
            raise SocialAdminError(msg)

        try:
            payload = response.json()
        except ValueError as exc:
            msg = "Admin social response was not valid JSON"
            raise SocialAdminError(msg) from exc
        return _parse_feed(payload)


def group_posts(posts: cabc.Iterable[SocialPost]) -> dict[str, list[SocialPost]]:
    """Group ``posts`` as national, then state, then specialty.

    Posts with any other category are dropped.

    Examples
    --------
    >>> post = SocialPost("national", "national", "National", "t", "l", 1, 1)
    >>> list(group_posts([post]))
    ['national', 'state', 'specialty']
    """
    grouped: dict[str, list[SocialPost]] = {key: [] for key in POST_CATEGORIES}
    for post in posts:
        bucket = grouped.get(post.category)
        if bucket is not None:
            bucket.append(post)
    return grouped


def _parse_feed(payload: object) -> SocialFeed:
    match payload:
        case {"posts": list() as raw_posts, **rest}:
            counts = rest.get("counts")
        case _:
            msg = "Admin social response is missing a 'posts' list"
            raise SocialAdminError(msg)
    return SocialFeed(
        posts=tuple(_parse_post(raw) for raw in raw_posts),
        counts=_parse_counts(counts),
    )


def _parse_post(raw: object) -> SocialPost:
    match raw:
        case {"id": str() as post_id, "category": str() as category, **rest}:
            twitter = _coerce_str(rest.get("twitter"))
            linkedin = _coerce_str(rest.get("linkedin"))
            return SocialPost(
                id=post_id,
                category=category,
                label=_coerce_str(rest.get("label")) or post_id,
                twitter=twitter,
                linkedin=linkedin,
                twitter_chars=_coerce_int(rest.get("twitterChars"), len(twitter)),
                linkedin_chars=_coerce_int(rest.get("linkedinChars"), len(linkedin)),
            )
        case _:
            msg = f"Malformed social post entry: {raw!r}"
            raise SocialAdminError(msg)


def _parse_counts(raw: object) -> SocialCounts:
    if not isinstance(raw, dict):
        return SocialCounts()
    return SocialCounts(
        national=_coerce_int(raw.get("national"), 0),
        states=_coerce_int(raw.get("states"), 0),
        specialties=_coerce_int(raw.get("specialties"), 0),
    )


def _coerce_str(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


__all__ = [
    "POST_CATEGORIES",
    "AdminAuthenticationRequired",
    "SocialAdminClient",
    "SocialAdminError",
    "SocialCounts",
    "SocialFeed",
    "SocialPost",
    "group_posts",
]
