"""
Article repository: the only code that writes articles.

Every write runs the same pipeline:

    validate -> (update: load existing) -> assign slug -> sanitize content
    -> publish transition -> persist -> re-read

Collaborators are passed in explicitly so tests can swap them:

    service = ArticleService(
        storage=get_object_storage(),        # orphaned image cleanup
        sanitize_policy=SanitizePolicy.REJECT,
        clock=timezone.now,
    )
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from apps.core.exceptions import (
    DuplicateError,
    ErrorCode,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from apps.storage.lifecycle import find_orphaned_images, purge_after_commit

from .models import Article
from .publishing import compute_published_at, transition
from .sanitizer import SanitizePolicy, sanitize_html
from .slugs import assign_slug, slug_needs_update

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ('title', 'content', 'excerpt', 'category')
OPTIONAL_FIELDS = ('featured_image_url', 'featured_image_alt', 'youtube_url', 'meta_description')
ALL_CATEGORIES = 'All'


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional(value):
    """Store blank optional fields as NULL."""
    return None if _is_blank(value) else value


@dataclass
class ArticlePage:
    """One page of a filtered article listing."""
    items: List[Article]
    page: int
    page_size: int
    page_count: int
    total: int

    def pagination(self) -> dict:
        return {
            'page': self.page,
            'page_size': self.page_size,
            'page_count': self.page_count,
            'total': self.total,
        }


class ArticleService:
    """
    CRUD for articles.

    Args:
        storage: ObjectStorage used to delete images an edit orphaned.
            None disables cleanup.
        sanitize_policy: Failure policy for the HTML sanitizer; None uses
            the configured default.
        clock: Returns the current aware datetime.
    """

    def __init__(
        self,
        storage=None,
        sanitize_policy: Optional[SanitizePolicy] = None,
        clock: Optional[Callable] = None,
    ):
        self.storage = storage
        self.sanitize_policy = sanitize_policy
        self.clock = clock or timezone.now

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def slug_exists(slug: str, exclude_id: Optional[int] = None) -> bool:
        queryset = Article.objects.filter(slug=slug)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    @staticmethod
    def _check_required(data: dict, fields) -> None:
        missing = [name for name in fields if _is_blank(data.get(name))]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                code=ErrorCode.MISSING_FIELD,
                details={'missing': missing},
            )

    def _image_url(self, url):
        """Blank as None; raw bucket URLs moved onto the public domain."""
        url = _optional(url)
        if url and self.storage is not None:
            return self.storage.ensure_public_domain(url)
        return url

    def _sanitize(self, html: str) -> str:
        return sanitize_html(html, self.sanitize_policy)

    def _save(self, article: Article, **save_kwargs) -> None:
        try:
            with transaction.atomic():
                article.save(**save_kwargs)
        except IntegrityError as exc:
            logger.warning("Slug conflict saving article %r: %s", article.slug, exc)
            raise DuplicateError(
                f"An article with slug '{article.slug}' already exists",
                field='slug',
            ) from exc

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_by_id(self, article_id, published_only: bool = False) -> Article:
        queryset = Article.objects.filter(pk=article_id)
        if published_only:
            queryset = queryset.filter(published=True)
        article = queryset.first()
        if article is None:
            raise NotFoundError("Article not found")
        return article

    def get_by_slug(self, slug: str, published_only: bool = False) -> Article:
        if _is_blank(slug):
            raise ValidationError("Article slug is required", field='slug')
        queryset = Article.objects.filter(slug=slug)
        if published_only:
            queryset = queryset.filter(published=True)
        article = queryset.first()
        if article is None:
            raise NotFoundError("Article not found")
        return article

    def list(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        published_only: bool = False,
    ) -> ArticlePage:
        """
        Filtered, paginated listing, newest first.

        Filters combine with AND. ``category='All'`` means no category
        filter; ``search`` is a case-insensitive title substring.
        """
        page = max(1, int(page or 1))
        page_size = int(page_size or settings.ARTICLE_PAGE_SIZE)
        page_size = min(max(1, page_size), settings.ARTICLE_MAX_PAGE_SIZE)

        queryset = Article.objects.all()
        if published_only:
            queryset = queryset.filter(published=True)
        if category and category != ALL_CATEGORIES:
            queryset = queryset.filter(category=category)
        search = (search or '').strip()
        if search:
            queryset = queryset.filter(title__icontains=search)

        total = queryset.count()
        offset = (page - 1) * page_size
        items = list(queryset.order_by('-created_at', '-id')[offset:offset + page_size])

        return ArticlePage(
            items=items,
            page=page,
            page_size=page_size,
            page_count=math.ceil(total / page_size),
            total=total,
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, data: dict) -> Article:
        """Create an article; returns the row as re-read from the database."""
        self._check_required(data, REQUIRED_FIELDS)

        now = self.clock()
        published = bool(data.get('published', False))
        article = Article(
            title=data['title'],
            slug=assign_slug(
                data['title'],
                self.slug_exists,
                override=data.get('slug'),
                clock=lambda: now,
            ),
            content=self._sanitize(data['content']),
            excerpt=data['excerpt'],
            category=data['category'],
            published=published,
            published_at=compute_published_at(False, None, published, now=now),
            created_at=now,
            **{name: _optional(data.get(name)) for name in OPTIONAL_FIELDS},
        )
        article.featured_image_url = self._image_url(article.featured_image_url)

        self._save(article, force_insert=True)

        created = Article.objects.filter(pk=article.pk).first()
        if created is None:
            raise PersistenceError("Failed to create article")

        logger.info(
            "Created article %s (slug=%s, published=%s)",
            created.pk, created.slug, created.published,
        )
        return created

    def update(self, article_id, data: dict, partial: bool = True) -> Article:
        """
        Update an article.

        With ``partial=False`` every required field must be supplied.
        Images the edit removed from the content, and a replaced featured
        image, are deleted from storage after the write commits.
        """
        article = Article.objects.filter(pk=article_id).first()
        if article is None:
            raise NotFoundError("Article not found")

        if partial:
            self._check_required(data, [name for name in REQUIRED_FIELDS if name in data])
        else:
            self._check_required(data, REQUIRED_FIELDS)

        old_content = article.content
        old_featured = article.featured_image_url

        new_title = data.get('title', article.title)
        override = data.get('slug')
        if slug_needs_update(article.title, new_title, override):
            article.slug = assign_slug(
                new_title,
                self.slug_exists,
                override=override,
                article_id=article.pk,
                current_slug=article.slug,
            )
        article.title = new_title

        if 'content' in data:
            article.content = self._sanitize(data['content'])
        for name in ('excerpt', 'category'):
            if name in data:
                setattr(article, name, data[name])
        for name in OPTIONAL_FIELDS:
            if name in data:
                setattr(article, name, _optional(data[name]))
        if 'featured_image_url' in data:
            article.featured_image_url = self._image_url(data['featured_image_url'])

        if 'published' in data and data['published'] is not None:
            requested = bool(data['published'])
            change = transition(article.published, requested)
            article.published_at = compute_published_at(
                article.published, article.published_at, requested, now=self.clock(),
            )
            article.published = requested
            if change:
                logger.info("Article %s: %s", article.pk, change)

        try:
            self._save(article, force_update=True)
        except DuplicateError:
            raise
        except DatabaseError as exc:
            # Forced update matched no rows: deleted concurrently
            logger.error("Failed to update article %s: %s", article.pk, exc)
            raise PersistenceError("Failed to update article") from exc

        orphaned = find_orphaned_images(
            old_content, article.content, old_featured, article.featured_image_url,
        )
        if orphaned:
            logger.info("Article %s orphaned %d image(s)", article.pk, len(orphaned))
            purge_after_commit(self.storage, orphaned)

        return Article.objects.get(pk=article.pk)

    def delete(self, article_id) -> None:
        """Hard delete; images referenced by the article are left in storage."""
        deleted, _ = Article.objects.filter(pk=article_id).delete()
        if not deleted:
            raise NotFoundError("Article not found or could not be deleted")
        logger.info("Deleted article %s", article_id)
