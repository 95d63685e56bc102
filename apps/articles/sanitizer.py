"""
Allow-list HTML sanitizer for article content.

Tags outside the allow-list are unwrapped (their children are kept);
script-like containers are dropped with everything inside them.

What happens when sanitization itself fails is an explicit policy:

- SanitizePolicy.PASSTHROUGH: log and return the input unchanged
- SanitizePolicy.REJECT: raise ProcessingError and refuse the save

The default comes from settings.ARTICLE_SANITIZE_FAILURE_POLICY.
"""

import logging
from enum import Enum
from typing import Optional

from bs4 import BeautifulSoup, Comment
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.core.exceptions import ProcessingError

logger = logging.getLogger(__name__)


ALLOWED_TAGS = frozenset([
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'p', 'br', 'hr',
    'ul', 'ol', 'li',
    'blockquote', 'pre', 'code',
    'em', 'strong', 'del', 's',
    'a', 'img',
    'div', 'span',
    'table', 'thead', 'tbody', 'tr', 'th', 'td',
    'iframe',
])

ALLOWED_ATTRIBUTES = frozenset([
    'href', 'src', 'alt', 'title', 'class', 'target',
    'style', 'width', 'height', 'id',
])

IFRAME_ATTRIBUTES = frozenset([
    'frameborder', 'allow', 'allowfullscreen', 'referrerpolicy',
])

# Removed together with their content
DROP_WITH_CONTENT = frozenset([
    'script', 'style', 'noscript', 'template', 'object', 'embed',
])

URL_ATTRIBUTES = frozenset(['href', 'src'])
UNSAFE_URL_SCHEMES = ('javascript:', 'vbscript:', 'data:')


class SanitizePolicy(str, Enum):
    """What to do when the sanitizer itself fails."""
    PASSTHROUGH = 'passthrough'
    REJECT = 'reject'


def default_policy() -> SanitizePolicy:
    value = getattr(settings, 'ARTICLE_SANITIZE_FAILURE_POLICY', SanitizePolicy.PASSTHROUGH.value)
    try:
        return SanitizePolicy(value)
    except ValueError:
        raise ImproperlyConfigured(
            f"ARTICLE_SANITIZE_FAILURE_POLICY must be one of "
            f"{[p.value for p in SanitizePolicy]}, got {value!r}"
        )


def _is_unsafe_url(value) -> bool:
    # Browsers ignore embedded whitespace/control chars in schemes
    compact = ''.join(ch for ch in str(value) if ch > ' ').lower()
    return compact.startswith(UNSAFE_URL_SCHEMES)


def _clean(html: str) -> str:
    soup = BeautifulSoup(html, 'html.parser')

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(list(DROP_WITH_CONTENT)):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue

        allowed = ALLOWED_ATTRIBUTES
        if tag.name == 'iframe':
            allowed = ALLOWED_ATTRIBUTES | IFRAME_ATTRIBUTES

        for attr in list(tag.attrs):
            name = attr.lower()
            if name not in allowed:
                del tag.attrs[attr]
            elif name in URL_ATTRIBUTES and _is_unsafe_url(tag.attrs[attr]):
                del tag.attrs[attr]

    return str(soup)


def sanitize_html(html: Optional[str], policy: Optional[SanitizePolicy] = None) -> str:
    """
    Return ``html`` reduced to the allow-listed tags and attributes.

    Args:
        html: Article HTML as submitted by the editor.
        policy: Failure policy; defaults to the configured one.

    Raises:
        ProcessingError: sanitization failed and the policy is REJECT.
    """
    if not html:
        return ''

    policy = SanitizePolicy(policy) if policy is not None else default_policy()

    try:
        return _clean(html)
    except Exception as exc:
        if policy is SanitizePolicy.REJECT:
            logger.error("Sanitization failed, rejecting content: %s", exc)
            raise ProcessingError(
                "Article content could not be sanitized",
                field='content',
            ) from exc

        logger.error(
            "Sanitization failed, storing content unsanitized (policy=%s): %s",
            policy.value, exc,
        )
        return html
