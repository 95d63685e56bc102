"""
Object storage API URLs. Mounted at /api/storage/ in main urls.py.
"""

from django.urls import path
from .views import UploadUrlView, DeleteObjectView

app_name = 'storage'

urlpatterns = [
    path('upload-url/', UploadUrlView.as_view(), name='upload-url'),
    path('delete/', DeleteObjectView.as_view(), name='delete'),
]
