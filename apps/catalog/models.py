"""
Car model catalog models.
One row per vehicle model page on the public site.
"""

from django.db import models
from apps.core.models import TimestampedModel


class CarModel(TimestampedModel):
    """
    A vehicle model page.

    The primary key is a slug of the model name (e.g. ``tank-300``) and
    doubles as the public URL segment. Colours, gallery and specification
    tables are stored as JSON lists:

        colors:          [{"name", "hex", "backgroundColor", "imageUrl"?}]
        gallery:         [{"imageUrl", "alt"}]
        specifications:  [{"categoryTitle", "specs": [{"key", "value"}]}]
    """

    id = models.CharField(
        primary_key=True,
        max_length=100,
        verbose_name='ID',
        help_text='Slug of the model name, used in public URLs'
    )

    name = models.CharField(
        max_length=255,
        verbose_name='Name'
    )

    featured_image = models.CharField(
        max_length=1000,
        verbose_name='Featured Image',
        help_text='Hero image URL'
    )

    subheader = models.CharField(
        max_length=255,
        verbose_name='Subheader',
        help_text='Text under the model name in the hero section'
    )

    price = models.CharField(
        max_length=100,
        verbose_name='Price',
        help_text='Display price, free text (e.g. "Rp 854 Juta")'
    )

    sub_image = models.CharField(
        max_length=1000,
        null=True,
        blank=True,
        verbose_name='Secondary Image'
    )

    features = models.JSONField(
        default=list,
        verbose_name='Features',
        help_text='List of feature strings, at least one'
    )

    description = models.TextField(
        verbose_name='Description'
    )

    main_product_image = models.CharField(
        max_length=1000,
        verbose_name='Main Product Image',
        help_text='Image used in the navbar and model listings'
    )

    colors = models.JSONField(
        default=list,
        verbose_name='Colors',
        help_text='Colour options, at least one'
    )

    gallery = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Gallery'
    )

    specifications = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Specifications'
    )

    category = models.CharField(
        max_length=50,
        db_index=True,
        verbose_name='Category',
        help_text='Category key, e.g. suv'
    )

    category_display = models.CharField(
        max_length=100,
        verbose_name='Category Display Name',
        help_text='Category label shown on the site, e.g. SUV'
    )

    published = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name='Published'
    )

    class Meta:
        db_table = 'car_models'
        ordering = ['name']
        verbose_name = 'Car Model'
        verbose_name_plural = 'Car Models'

    def __str__(self):
        return self.name

    def image_urls(self):
        """Every object-storage image this model references."""
        return collect_image_urls({
            'featured_image': self.featured_image,
            'sub_image': self.sub_image,
            'main_product_image': self.main_product_image,
            'colors': self.colors,
            'gallery': self.gallery,
        })


def collect_image_urls(data):
    """Image URLs referenced by a car model payload or row, in field order."""
    urls = [
        data.get('featured_image'),
        data.get('sub_image'),
        data.get('main_product_image'),
    ]
    urls.extend(color.get('imageUrl') for color in data.get('colors') or [])
    urls.extend(image.get('imageUrl') for image in data.get('gallery') or [])
    return [url for url in urls if url]
