"""
Car model API URLs. Mounted at /api/car-models/ in main urls.py.
"""

from django.urls import path, include
from config.routers import SafeDefaultRouter
from .views import CarModelViewSet

app_name = 'catalog'

router = SafeDefaultRouter()
router.register(r'', CarModelViewSet, basename='car-model')

urlpatterns = [
    path('', include(router.urls)),
]
