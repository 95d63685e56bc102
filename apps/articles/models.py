"""
Article models for the Showroom CMS.
News and promo posts shown on the public site.
"""

from django.db import models
from apps.core.models import TimestampedModel


class Article(TimestampedModel):
    """
    A news or promo article.

    Written only through ArticleService, which owns slug assignment,
    content sanitization and publish timestamps.
    """

    # Suggested categories; any non-empty string is accepted
    CATEGORY_NEWS = 'News'
    CATEGORY_PROMO = 'Promo'
    CATEGORY_CHOICES = [
        (CATEGORY_NEWS, 'News'),
        (CATEGORY_PROMO, 'Promo'),
    ]

    title = models.CharField(
        max_length=255,
        verbose_name='Title',
        help_text='Article headline'
    )

    slug = models.CharField(
        max_length=255,
        unique=True,
        blank=True,
        verbose_name='Slug',
        help_text='URL identifier, unique across all articles'
    )

    content = models.TextField(
        verbose_name='Content',
        help_text='Sanitized article HTML'
    )

    excerpt = models.TextField(
        verbose_name='Excerpt',
        help_text='Short summary shown in listings'
    )

    category = models.CharField(
        max_length=50,
        db_index=True,
        verbose_name='Category',
        help_text='e.g. News or Promo'
    )

    featured_image_url = models.URLField(
        max_length=1000,
        null=True,
        blank=True,
        verbose_name='Featured Image URL'
    )

    featured_image_alt = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        verbose_name='Featured Image Alt Text'
    )

    youtube_url = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name='YouTube URL'
    )

    published = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name='Published'
    )

    published_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Published At',
        help_text='Set when published, cleared when unpublished'
    )

    meta_description = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name='Meta Description'
    )

    class Meta:
        db_table = 'articles'
        verbose_name = 'Article'
        verbose_name_plural = 'Articles'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['published', '-created_at'], name='articles_pub_created_idx'),
        ]

    def __str__(self):
        return self.title
