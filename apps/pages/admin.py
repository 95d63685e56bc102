"""
Admin interface for site pages.
"""

from django.contrib import admin
from .models import AboutUs, ContactInfo, HomepageConfig, HomepageSection, SiteSettings


class HomepageSectionInline(admin.StackedInline):
    model = HomepageSection
    extra = 0
    ordering = ['order']
    fields = ['order', 'section_type', 'title', 'subtitle', 'type_specific_data']


@admin.register(HomepageConfig)
class HomepageConfigAdmin(admin.ModelAdmin):

    list_display = ['hero_title', 'updated_at']

    inlines = [HomepageSectionInline]

    fieldsets = (
        ('Hero', {
            'fields': (
                'hero_title',
                'hero_subtitle',
                'hero_desktop_image_url',
                'hero_mobile_image_url',
                'hero_primary_button_text',
                'hero_primary_button_link',
                'hero_secondary_button_text',
                'hero_secondary_button_link',
            )
        }),
        ('SEO', {
            'fields': ('meta_title', 'meta_description'),
            'classes': ('collapse',)
        }),
    )


@admin.register(AboutUs)
class AboutUsAdmin(admin.ModelAdmin):
    list_display = ['title', 'updated_at']


@admin.register(ContactInfo)
class ContactInfoAdmin(admin.ModelAdmin):

    list_display = ['phone', 'email', 'updated_at']

    fieldsets = (
        ('Contact', {
            'fields': ('phone', 'email', 'address', 'whatsapp_url')
        }),
        ('Social', {
            'fields': ('facebook', 'instagram', 'x', 'youtube')
        }),
        ('Page', {
            'fields': (
                'hero_title',
                'hero_tagline',
                'hero_subtitle',
                'hero_highlight_color',
                'hero_desktop_image_url',
                'hero_mobile_image_url',
                'form_title',
                'form_description',
                'gmaps_place_query',
                'location_options',
            )
        }),
        ('Branding', {
            'fields': ('logo_url', 'logo_white_url')
        }),
        ('SEO', {
            'fields': ('meta_title', 'meta_description', 'meta_keywords', 'meta_image'),
            'classes': ('collapse',)
        }),
    )


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ['brand_name', 'google_analytics_id', 'google_tag_manager_id', 'updated_at']
