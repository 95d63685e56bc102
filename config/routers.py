"""
Custom DRF Router to avoid converter registration conflict.

DRF's DefaultRouter uses format_suffix_patterns which registers a custom
converter 'drf_format_suffix'. When multiple routers exist across apps,
this causes a ValueError: "Converter 'drf_format_suffix' is already registered."

Solution: set include_format_suffixes=False on DefaultRouter.
"""

from rest_framework.routers import DefaultRouter


class SafeDefaultRouter(DefaultRouter):
    """
    DefaultRouter that doesn't use format suffix patterns.

    Every app mounts its own router under /api/<app>/, so the per-app
    API root view is not wanted either.
    """
    include_format_suffixes = False
    include_root_view = False
