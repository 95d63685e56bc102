"""
Car model serializers.

The nested JSON shapes (colours, gallery, specifications) keep the
camelCase keys the public site reads.
"""

from rest_framework import serializers
from .models import CarModel


class ColorSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    # Blank hex/background fall back to defaults in CarModelService
    hex = serializers.CharField(required=False, allow_blank=True, max_length=20)
    backgroundColor = serializers.CharField(required=False, allow_blank=True, max_length=20)
    imageUrl = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1000)


class GalleryImageSerializer(serializers.Serializer):
    imageUrl = serializers.CharField(max_length=1000)
    alt = serializers.CharField(max_length=255)


class SpecItemSerializer(serializers.Serializer):
    key = serializers.CharField(max_length=255)
    value = serializers.CharField(max_length=1000, allow_blank=True)


class SpecCategorySerializer(serializers.Serializer):
    categoryTitle = serializers.CharField(max_length=255)
    specs = SpecItemSerializer(many=True)


class CarModelSerializer(serializers.ModelSerializer):
    """Full car model representation."""

    class Meta:
        model = CarModel
        fields = [
            'id',
            'name',
            'featured_image',
            'subheader',
            'price',
            'sub_image',
            'features',
            'description',
            'main_product_image',
            'colors',
            'gallery',
            'specifications',
            'category',
            'category_display',
            'published',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CarModelListSerializer(serializers.ModelSerializer):
    """Card-sized representation for navbars and listings."""

    class Meta:
        model = CarModel
        fields = [
            'id',
            'name',
            'subheader',
            'price',
            'main_product_image',
            'category',
            'category_display',
            'published',
        ]
        read_only_fields = fields


class CarModelWriteSerializer(serializers.Serializer):
    """Create/update payload."""

    id = serializers.SlugField(required=False, allow_blank=True, max_length=100)
    name = serializers.CharField(max_length=255)
    featured_image = serializers.CharField(max_length=1000)
    subheader = serializers.CharField(max_length=255)
    price = serializers.CharField(max_length=100)
    sub_image = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=1000)
    features = serializers.ListField(child=serializers.CharField(), allow_empty=False)
    description = serializers.CharField()
    main_product_image = serializers.CharField(max_length=1000)
    colors = ColorSerializer(many=True, allow_empty=False)
    gallery = GalleryImageSerializer(many=True, required=False)
    specifications = SpecCategorySerializer(many=True, required=False)
    category = serializers.CharField(max_length=50)
    category_display = serializers.CharField(max_length=100)
    published = serializers.BooleanField(required=False)


class CarModelSearchSerializer(serializers.Serializer):
    query = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    published_only = serializers.BooleanField(required=False, default=False)
