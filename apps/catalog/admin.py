"""
Admin interface for the car model catalog.
"""

from django.contrib import admin
from django.utils.html import format_html
from .models import CarModel
from .services import normalize_colors


@admin.register(CarModel)
class CarModelAdmin(admin.ModelAdmin):
    """Admin interface for CarModel."""

    list_display = [
        'name',
        'id',
        'category_display',
        'price',
        'published_badge',
        'updated_at',
    ]

    list_filter = ['published', 'category']

    search_fields = ['id', 'name', 'subheader']

    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Model', {
            'fields': ('id', 'name', 'subheader', 'price', 'category', 'category_display', 'published')
        }),
        ('Images', {
            'fields': ('featured_image', 'main_product_image', 'sub_image')
        }),
        ('Content', {
            'fields': ('description', 'features', 'colors', 'gallery', 'specifications')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        # The ID is a public URL segment; fixed once created
        if obj is not None:
            return self.readonly_fields + ['id']
        return self.readonly_fields

    def published_badge(self, obj):
        if obj.published:
            return format_html('<span style="color: green; font-weight: bold;">{}</span>', 'LIVE')
        return format_html('<span style="color: gray;">{}</span>', 'DRAFT')
    published_badge.short_description = 'Status'
    published_badge.admin_order_field = 'published'

    def save_model(self, request, obj, form, change):
        obj.colors = normalize_colors(obj.colors)
        super().save_model(request, obj, form, change)
