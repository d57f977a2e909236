"""Composable filter criteria over the post collection.

Each criterion is a small frozen dataclass. ``to_clause`` compiles one
criterion into a SQLAlchemy boolean expression and ``combine`` AND-s a list
of them; an empty list selects every post.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, Union

from sqlalchemy import and_, exists, false, func, or_, select, true
from sqlalchemy.sql.elements import ColumnElement

from chirp_feed.models.post import Post, PostMedia

IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {"jpg", "jpeg", "png", "gif", "bmp", "svg", "webp"}
)
VIDEO_EXTENSIONS: Final[frozenset[str]] = frozenset({"mp4", "webm", "mkv", "mov", "avi"})
MEDIA_EXTENSIONS: Final[frozenset[str]] = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS


@dataclass(frozen=True)
class ByAuthor:
    """Posts written by one user."""

    user_id: int


@dataclass(frozen=True)
class IsReply:
    """Replies when ``value`` is True, root posts otherwise."""

    value: bool


@dataclass(frozen=True)
class HasMediaOfKind:
    """Posts with at least one attachment whose extension is in ``kinds``."""

    kinds: frozenset[str]


@dataclass(frozen=True)
class WithoutMedia:
    """Posts with an empty media sequence."""


@dataclass(frozen=True)
class IdIn:
    """Posts whose id is a member of ``ids``."""

    ids: frozenset[int]


@dataclass(frozen=True)
class AuthorIn:
    """Posts whose author is a member of ``user_ids``."""

    user_ids: frozenset[int]


Criterion = Union[ByAuthor, IsReply, HasMediaOfKind, WithoutMedia, IdIn, AuthorIn]


def id_in(ids: Iterable[int]) -> IdIn:
    """Build an ``IdIn`` criterion from any iterable of ids."""
    return IdIn(frozenset(ids))


def author_in(user_ids: Iterable[int]) -> AuthorIn:
    """Build an ``AuthorIn`` criterion from any iterable of user ids."""
    return AuthorIn(frozenset(user_ids))


def _extension_clause(kinds: frozenset[str]) -> ColumnElement[bool]:
    url = func.lower(PostMedia.url)
    return or_(*(url.like(f"%.{kind.lower()}") for kind in sorted(kinds)))


def to_clause(criterion: Criterion) -> ColumnElement[bool]:
    """Compile a single criterion to a SQL boolean expression.

    Raises:
        TypeError: If ``criterion`` is not one of the known criterion types.
    """
    if isinstance(criterion, ByAuthor):
        return Post.author_user_id == criterion.user_id
    if isinstance(criterion, IsReply):
        if criterion.value:
            return Post.parent_post_id.isnot(None)
        return Post.parent_post_id.is_(None)
    if isinstance(criterion, HasMediaOfKind):
        if not criterion.kinds:
            return false()
        return exists(
            select(PostMedia.post_id).where(
                PostMedia.post_id == Post.id,
                _extension_clause(criterion.kinds),
            )
        )
    if isinstance(criterion, WithoutMedia):
        return ~exists(select(PostMedia.post_id).where(PostMedia.post_id == Post.id))
    if isinstance(criterion, IdIn):
        return Post.id.in_(sorted(criterion.ids))
    if isinstance(criterion, AuthorIn):
        return Post.author_user_id.in_(sorted(criterion.user_ids))
    raise TypeError(f"Unsupported post criterion: {criterion!r}")


def combine(criteria: Sequence[Criterion]) -> ColumnElement[bool]:
    """AND together every criterion; no criteria matches all posts."""
    if not criteria:
        return true()
    return and_(*(to_clause(criterion) for criterion in criteria))
