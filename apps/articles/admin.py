"""
Admin interface for Article management.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import Article
from .services import ArticleService


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    """
    Admin interface for Article model.

    Saves go through ArticleService so slugs, sanitization and publish
    timestamps follow the same rules as the API.
    """

    list_display = [
        'title',
        'slug',
        'category',
        'published_badge',
        'published_at',
        'created_at',
    ]

    list_filter = [
        'published',
        'category',
        ('created_at', admin.DateFieldListFilter),
    ]

    search_fields = ['title', 'slug', 'excerpt']

    readonly_fields = ['published_at', 'created_at', 'updated_at']

    date_hierarchy = 'created_at'

    fieldsets = (
        ('Article', {
            'fields': ('title', 'slug', 'category', 'excerpt', 'content')
        }),
        ('Media', {
            'fields': ('featured_image_url', 'featured_image_alt', 'youtube_url')
        }),
        ('Publishing', {
            'fields': ('published', 'published_at', 'meta_description')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def published_badge(self, obj):
        """Display published state."""
        if obj.published:
            return format_html('<span style="color: green; font-weight: bold;">{}</span>', 'LIVE')
        return format_html('<span style="color: gray;">{}</span>', 'DRAFT')
    published_badge.short_description = 'Status'
    published_badge.admin_order_field = 'published'

    def save_model(self, request, obj, form, change):
        service = ArticleService()
        data = dict(form.cleaned_data)
        if change:
            saved = service.update(obj.pk, data)
        else:
            saved = service.create(data)
        obj.pk = saved.pk
        obj.refresh_from_db()
