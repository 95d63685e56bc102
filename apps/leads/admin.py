"""
Admin interface for contact leads.
"""

from django.contrib import admin
from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):

    list_display = [
        'full_name',
        'email',
        'phone_number',
        'location',
        'car_model_interest',
        'status',
        'created_at',
    ]

    list_filter = ['status', 'location', ('created_at', admin.DateFieldListFilter)]

    list_editable = ['status']

    search_fields = ['full_name', 'email', 'phone_number', 'car_model_interest']

    readonly_fields = ['full_name', 'email', 'phone_number', 'location', 'car_model_interest', 'created_at']

    date_hierarchy = 'created_at'

    actions = ['mark_contacted']

    @admin.action(description='Mark selected as contacted')
    def mark_contacted(self, request, queryset):
        updated = queryset.update(status=ContactSubmission.STATUS_CONTACTED)
        self.message_user(request, f"{updated} submission(s) marked as contacted.")
