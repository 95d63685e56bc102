"""
Role-Based Permissions for the Showroom admin dashboard.

Maps EditorProfile.role to DRF permission classes.

Roles:
- viewer: Read-only access to dashboard data (leads, drafts)
- editor: Read/write access to articles, car models and site pages
- admin: Full access including destructive operations on leads

Usage:
    from apps.core.permissions import IsEditor, IsAdmin

    class MyView(APIView):
        permission_classes = [IsEditor]
"""

from rest_framework.permissions import BasePermission
import logging

logger = logging.getLogger(__name__)


def get_user_role(user):
    """Resolve the dashboard role for an authenticated user."""
    if user.is_superuser:
        return 'admin'

    from apps.core.models import EditorProfile
    profile = EditorProfile.objects.filter(user=user).only('role').first()
    if profile is None:
        # No profile - default to viewer
        return 'viewer'
    return profile.role


class RolePermission(BasePermission):
    """Base class for role-based permissions."""

    # Override in subclasses
    allowed_roles = []

    def has_permission(self, request, view):
        """Check if user has required role."""
        if not request.user or not request.user.is_authenticated:
            return False

        user_role = get_user_role(request.user)
        allowed = user_role in self.allowed_roles
        if not allowed:
            logger.info(
                "Permission denied for user %s (role=%s) on %s",
                request.user.pk, user_role, request.path,
            )
        return allowed


class IsViewer(RolePermission):
    """
    Allow access to users with viewer role or higher.

    Viewers have read-only access.
    """
    allowed_roles = ['viewer', 'editor', 'admin']
    message = "Viewer access required."


class IsEditor(RolePermission):
    """
    Allow access to users with editor role or higher.

    Editors can:
    - Create, update and delete articles and car models
    - Edit homepage, about-us, contact info and site settings
    - Request upload URLs and delete stored images
    """
    allowed_roles = ['editor', 'admin']
    message = "Editor access required."


class IsAdmin(RolePermission):
    """
    Allow access to admin users only.

    Admins can:
    - Delete contact submissions
    - Manage users
    """
    allowed_roles = ['admin']
    message = "Admin access required."
