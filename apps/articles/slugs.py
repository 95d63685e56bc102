"""
Slug assignment for articles.

Slugs are derived from the title unless the editor supplies one. A
colliding slug gets a single disambiguating suffix:

- on create, the current time in milliseconds
- on update, the article's own id

Every slug fits ``MAX_SLUG_LENGTH``: the base is cut short enough for
the suffix to fit. There is no retry loop. If the suffixed slug still
collides, the unique constraint on ``articles.slug`` rejects the write.
"""

import re
from typing import Callable, Optional

from django.utils import timezone
from django.utils.text import slugify

FALLBACK_SLUG = 'article'

# articles.slug column width
MAX_SLUG_LENGTH = 255

_DISALLOWED = re.compile(r'[^a-z0-9-]+')
_HYPHENS = re.compile(r'-{2,}')


def slugify_title(title: str) -> str:
    """
    Lowercase ASCII slug of ``title``.

    Only ``[a-z0-9-]`` survives; words are joined by single hyphens and
    there is never a leading or trailing hyphen.
    """
    slug = slugify(title or '')
    slug = _DISALLOWED.sub('', slug)
    slug = _HYPHENS.sub('-', slug).strip('-')
    return fit_slug(slug or FALLBACK_SLUG)


def fit_slug(base: str, suffix: str = '') -> str:
    """
    ``base + suffix`` cut to ``MAX_SLUG_LENGTH``.

    Only the base is shortened; a hyphen left dangling by the cut is
    dropped so the suffix never follows a double hyphen.
    """
    limit = MAX_SLUG_LENGTH - len(suffix)
    if len(base) > limit:
        base = base[:limit].rstrip('-')
    return f"{base or FALLBACK_SLUG}{suffix}"


def clean_override(override) -> Optional[str]:
    """The editor-supplied slug, trimmed, or None when blank."""
    if override is None:
        return None
    override = str(override).strip()
    return override or None


def slug_needs_update(current_title: str, new_title: str, override=None) -> bool:
    """A slug is recomputed when an override is given or the title changed."""
    return clean_override(override) is not None or new_title != current_title


def assign_slug(
    title: str,
    slug_exists: Callable[[str, Optional[int]], bool],
    override=None,
    article_id: Optional[int] = None,
    current_slug: Optional[str] = None,
    clock: Optional[Callable] = None,
) -> str:
    """
    Compute the slug to store for an article.

    Args:
        title: Article title.
        slug_exists: ``slug_exists(slug, exclude_id)`` -> bool, supplied by
            the repository. ``exclude_id`` is None on create.
        override: Explicit slug from the editor, used verbatim once trimmed
            and cut to MAX_SLUG_LENGTH.
        article_id: Id of the article being updated; None on create.
        current_slug: Slug the article has now (update only).
        clock: Returns the current datetime; defaults to timezone.now.
    """
    candidate = fit_slug(clean_override(override) or slugify_title(title))

    if article_id is None:
        if slug_exists(candidate, None):
            now = (clock or timezone.now)()
            candidate = fit_slug(candidate, f"-{int(now.timestamp() * 1000)}")
        return candidate

    if candidate != current_slug and slug_exists(candidate, article_id):
        candidate = fit_slug(candidate, f"-{article_id}")
    return candidate
