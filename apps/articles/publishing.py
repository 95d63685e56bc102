"""
Publish-state transitions for articles.

    current  requested  published_at
    -------  ---------  ------------------
    False    True       now (first publish)
    True     False      None
    True     True       unchanged
    False    False      unchanged
"""

from typing import Optional

from django.utils import timezone

PUBLISH = 'publish'
UNPUBLISH = 'unpublish'


def transition(current_published, requested_published) -> Optional[str]:
    """``'publish'``, ``'unpublish'`` or None when the flag does not change."""
    if requested_published is None:
        return None
    current, requested = bool(current_published), bool(requested_published)
    if requested and not current:
        return PUBLISH
    if current and not requested:
        return UNPUBLISH
    return None


def compute_published_at(current_published, current_published_at, requested_published, now=None):
    """
    New ``published_at`` for a change of the published flag.

    ``requested_published=None`` means the caller did not touch the flag.
    """
    change = transition(current_published, requested_published)
    if change == PUBLISH:
        return now or timezone.now()
    if change == UNPUBLISH:
        return None
    return current_published_at
