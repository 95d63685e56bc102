"""
Article serializers.

Output uses ArticleSerializer. Input uses ArticleWriteSerializer, which
only checks types and lengths; required fields, slugs, sanitization and
publish timestamps are ArticleService's job.
"""

from rest_framework import serializers
from .models import Article


class ArticleSerializer(serializers.ModelSerializer):
    """Full article representation."""

    class Meta:
        model = Article
        fields = [
            'id',
            'title',
            'slug',
            'content',
            'excerpt',
            'category',
            'featured_image_url',
            'featured_image_alt',
            'youtube_url',
            'published',
            'published_at',
            'meta_description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ArticleListSerializer(serializers.ModelSerializer):
    """Compact serializer for article lists (no body)."""

    class Meta:
        model = Article
        fields = [
            'id',
            'title',
            'slug',
            'excerpt',
            'category',
            'featured_image_url',
            'featured_image_alt',
            'published',
            'published_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ArticleWriteSerializer(serializers.Serializer):
    """Create/update payload."""

    title = serializers.CharField(required=False, allow_blank=True, max_length=255)
    slug = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    content = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    excerpt = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True, max_length=50)
    featured_image_url = serializers.URLField(
        required=False, allow_blank=True, allow_null=True, max_length=1000,
    )
    featured_image_alt = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=255,
    )
    youtube_url = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=500,
    )
    published = serializers.BooleanField(required=False)
    meta_description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=500,
    )
