"""
Site page URLs. Mounted at /api/pages/ in main urls.py.
"""

from django.urls import path
from .views import AboutUsView, ContactInfoView, HomepageView, SiteSettingsView

app_name = 'pages'

urlpatterns = [
    path('homepage/', HomepageView.as_view(), name='homepage'),
    path('about-us/', AboutUsView.as_view(), name='about-us'),
    path('contact-info/', ContactInfoView.as_view(), name='contact-info'),
    path('site-settings/', SiteSettingsView.as_view(), name='site-settings'),
]
