from django.contrib import admin

from .models import EditorProfile


@admin.register(EditorProfile)
class EditorProfileAdmin(admin.ModelAdmin):
    """Admin configuration for EditorProfile model."""

    list_display = ['user', 'role', 'last_active_at', 'created_at']
    list_filter = ['role']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['created_at', 'updated_at', 'last_active_at']
