"""
Contact lead URLs. Mounted at /api/contact/ in main urls.py.
"""

from django.urls import path
from .views import (
    ContactSubmitView,
    SubmissionDetailView,
    SubmissionListView,
    SubmissionStatusView,
)

app_name = 'leads'

urlpatterns = [
    path('', ContactSubmitView.as_view(), name='submit'),
    path('submissions/', SubmissionListView.as_view(), name='submission-list'),
    path('submissions/<int:pk>/', SubmissionDetailView.as_view(), name='submission-detail'),
    path('submissions/<int:pk>/status/', SubmissionStatusView.as_view(), name='submission-status'),
]
