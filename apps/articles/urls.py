"""
Article API URLs. Mounted at /api/articles/ in main urls.py.
"""

from django.urls import path, include
from config.routers import SafeDefaultRouter
from .views import ArticleViewSet

app_name = 'articles'

router = SafeDefaultRouter()
router.register(r'', ArticleViewSet, basename='article')

urlpatterns = [
    path('', include(router.urls)),
]
