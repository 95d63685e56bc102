"""
Sitemap entries for published articles.
"""

from django.conf import settings
from django.contrib.sitemaps import Sitemap

from .models import Article


class ArticleSitemap(Sitemap):
    changefreq = 'weekly'
    priority = 0.7

    def items(self):
        return Article.objects.filter(published=True).order_by('-published_at', '-id')

    def location(self, item):
        return f"{settings.PUBLIC_ARTICLE_PATH}{item.slug}"

    def lastmod(self, item):
        return item.updated_at
