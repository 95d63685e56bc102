"""
Sitemap entries for published car models.
"""

from django.conf import settings
from django.contrib.sitemaps import Sitemap

from .models import CarModel


class CarModelSitemap(Sitemap):
    changefreq = 'monthly'
    priority = 0.8

    def items(self):
        return CarModel.objects.filter(published=True).order_by('name')

    def location(self, item):
        return f"{settings.PUBLIC_CAR_MODEL_PATH}{item.pk}"

    def lastmod(self, item):
        return item.updated_at
