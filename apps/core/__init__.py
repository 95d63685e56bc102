"""
Core app for the Showroom CMS.

Provides shared models, error handling, permissions, request tracing and
health checks.
"""
