"""
Image lifecycle bookkeeping.

An image becomes orphaned when an edit removes it from rich-text content
or replaces a featured/hero image. Orphans are deleted from object
storage after the edit commits; deletion is best effort and never fails
the save.
"""

import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup
from django.db import transaction

from apps.core.exceptions import ShowroomException

logger = logging.getLogger(__name__)


def _unique(urls: Iterable[Optional[str]]) -> List[str]:
    seen = []
    for url in urls:
        if url and url not in seen:
            seen.append(url)
    return seen


def extract_image_urls(html: Optional[str]) -> List[str]:
    """``src`` of every ``<img>`` in ``html``, in document order, without duplicates."""
    if not html:
        return []
    soup = BeautifulSoup(html, 'html.parser')
    return _unique(img.get('src') for img in soup.find_all('img'))


def find_orphaned_images(
    old_content: Optional[str],
    new_content: Optional[str],
    old_featured: Optional[str] = None,
    new_featured: Optional[str] = None,
) -> List[str]:
    """
    Images referenced before an edit and no longer referenced after it.

    An image that moved between the body and the featured slot is still
    in use and is not reported.
    """
    still_used = set(extract_image_urls(new_content))
    if new_featured:
        still_used.add(new_featured)

    before = extract_image_urls(old_content)
    if old_featured:
        before.append(old_featured)

    return [url for url in _unique(before) if url not in still_used]


def find_replaced_urls(old_urls: Iterable[Optional[str]], new_urls: Iterable[Optional[str]]) -> List[str]:
    """URLs present in ``old_urls`` and absent from ``new_urls``."""
    keep = {url for url in new_urls if url}
    return [url for url in _unique(old_urls) if url not in keep]


def purge_objects(storage, urls: Iterable[str]) -> List[str]:
    """
    Delete each URL from object storage; return the ones that were removed.

    Never raises. URLs outside our bucket and storage failures are logged
    and skipped.
    """
    purged = []
    for url in _unique(urls):
        if storage.extract_object_key(url) is None:
            logger.info("Skipping purge of foreign URL %s", url)
            continue
        try:
            storage.delete_image(url)
        except ShowroomException as e:
            logger.warning("Failed to purge orphaned image %s: %s", url, e)
            continue
        except Exception:
            logger.exception("Unexpected error purging orphaned image %s", url)
            continue
        purged.append(url)

    if purged:
        logger.info("Purged %d orphaned image(s)", len(purged))
    return purged


def purge_after_commit(storage, urls: Iterable[str]) -> None:
    """Schedule ``purge_objects`` to run once the current transaction commits."""
    pending = _unique(urls)
    if not pending or storage is None:
        return
    transaction.on_commit(lambda: purge_objects(storage, pending))
