"""
URL configuration for the Showroom CMS project.
"""

from django.contrib import admin
from django.contrib.sitemaps.views import sitemap
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from apps.core.urls import auth_urlpatterns
from apps.pages.sitemaps import SITEMAPS

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include((auth_urlpatterns, 'auth'))),
    path('api/articles/', include('apps.articles.urls')),
    path('api/car-models/', include('apps.catalog.urls')),
    path('api/contact/', include('apps.leads.urls')),
    path('api/pages/', include('apps.pages.urls')),
    path('api/storage/', include('apps.storage.urls')),
    path(
        'sitemap.xml',
        sitemap,
        {'sitemaps': SITEMAPS},
        name='django.contrib.sitemaps.views.sitemap',
    ),
    # Health check endpoints
    path('', include('apps.core.urls')),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Customize admin site
admin.site.site_header = "Showroom Administration"
admin.site.site_title = "Showroom Admin Portal"
admin.site.index_title = "Welcome to Showroom Administration"
