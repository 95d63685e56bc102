"""
Sitemap entries for the fixed public pages, plus the sitemap registry
mounted at /sitemap.xml.
"""

from django.contrib.sitemaps import Sitemap

from apps.articles.sitemaps import ArticleSitemap
from apps.catalog.sitemaps import CarModelSitemap

STATIC_PATHS = ['/', '/info-promo', '/kontak', '/about-us', '/tipe-mobil']


class StaticPageSitemap(Sitemap):
    changefreq = 'daily'
    priority = 1.0

    def items(self):
        return STATIC_PATHS

    def location(self, item):
        return item


SITEMAPS = {
    'pages': StaticPageSitemap,
    'articles': ArticleSitemap,
    'car-models': CarModelSitemap,
}
