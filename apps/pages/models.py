"""
Site page models: homepage, about us, contact info and site settings.
"""

from django.db import models
from apps.core.models import SingletonModel, TimestampedModel


# =============================================================================
# Homepage
# =============================================================================

class HomepageConfig(SingletonModel):
    """
    Homepage hero and SEO fields. A single row keyed ``main``; the
    sections below hang off it.
    """

    hero_desktop_image_url = models.URLField(
        max_length=1000,
        verbose_name='Hero Desktop Image URL'
    )

    hero_mobile_image_url = models.URLField(
        max_length=1000,
        verbose_name='Hero Mobile Image URL'
    )

    hero_title = models.CharField(
        max_length=255,
        verbose_name='Hero Title'
    )

    hero_subtitle = models.TextField(
        null=True,
        blank=True,
        verbose_name='Hero Subtitle'
    )

    hero_primary_button_text = models.CharField(max_length=100, null=True, blank=True)
    hero_primary_button_link = models.CharField(max_length=500, null=True, blank=True)
    hero_secondary_button_text = models.CharField(max_length=100, null=True, blank=True)
    hero_secondary_button_link = models.CharField(max_length=500, null=True, blank=True)

    meta_title = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        verbose_name='Meta Title'
    )

    meta_description = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name='Meta Description'
    )

    class Meta:
        db_table = 'homepage_config'
        verbose_name = 'Homepage Configuration'
        verbose_name_plural = 'Homepage Configuration'

    def __str__(self):
        return f"Homepage ({self.hero_title})"

    @classmethod
    def defaults(cls):
        return {
            'hero_desktop_image_url': '',
            'hero_mobile_image_url': '',
            'hero_title': 'Welcome',
        }

    def hero_image_urls(self):
        return [url for url in (self.hero_desktop_image_url, self.hero_mobile_image_url) if url]


class HomepageSection(TimestampedModel):
    """
    One block on the homepage, rendered by ``section_type``.

    Variant fields live in ``type_specific_data``; see
    ``apps.pages.sections`` for the shape of each type.
    """

    TYPE_DEFAULT = 'default'
    TYPE_FEATURE_CARDS_GRID = 'feature_cards_grid'
    TYPE_BANNER = 'banner'

    TYPE_CHOICES = [
        (TYPE_DEFAULT, 'Model Showcase'),
        (TYPE_FEATURE_CARDS_GRID, 'Feature Cards Grid'),
        (TYPE_BANNER, 'Banner'),
    ]

    config = models.ForeignKey(
        HomepageConfig,
        on_delete=models.CASCADE,
        related_name='sections',
        verbose_name='Homepage'
    )

    order = models.PositiveIntegerField(
        verbose_name='Order',
        help_text='Position on the page, starting at 0'
    )

    section_type = models.CharField(
        max_length=30,
        choices=TYPE_CHOICES,
        default=TYPE_DEFAULT,
        verbose_name='Section Type'
    )

    title = models.CharField(
        max_length=255,
        verbose_name='Title'
    )

    subtitle = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name='Subtitle'
    )

    type_specific_data = models.JSONField(
        default=dict,
        blank=True,
        verbose_name='Type-specific Data'
    )

    class Meta:
        db_table = 'homepage_sections'
        ordering = ['order']
        verbose_name = 'Homepage Section'
        verbose_name_plural = 'Homepage Sections'

    def __str__(self):
        return f"{self.order}: {self.title} ({self.section_type})"


# =============================================================================
# About us / contact info / site settings
# =============================================================================

class AboutUs(models.Model):
    """About-us page content. Content is sanitized HTML."""

    title = models.CharField(
        max_length=100,
        verbose_name='Title'
    )

    content = models.TextField(
        verbose_name='Content'
    )

    mission = models.TextField(null=True, blank=True, verbose_name='Mission')
    vision = models.TextField(null=True, blank=True, verbose_name='Vision')

    image_url = models.URLField(
        max_length=1000,
        null=True,
        blank=True,
        verbose_name='Image URL'
    )

    image_alt = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name='Image Alt Text'
    )

    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated At')

    class Meta:
        db_table = 'about_us'
        verbose_name = 'About Us'
        verbose_name_plural = 'About Us'

    def __str__(self):
        return self.title


class ContactInfo(models.Model):
    """Dealer contact details, social links and the contact page header."""

    phone = models.CharField(max_length=50, verbose_name='Phone')
    email = models.EmailField(max_length=255, verbose_name='Email')
    address = models.CharField(max_length=500, verbose_name='Address')

    facebook = models.CharField(max_length=500, verbose_name='Facebook URL')
    instagram = models.CharField(max_length=500, verbose_name='Instagram URL')
    x = models.CharField(max_length=500, verbose_name='X/Twitter URL')
    youtube = models.CharField(max_length=500, verbose_name='YouTube URL')
    whatsapp_url = models.URLField(max_length=1000, blank=True, default='', verbose_name='WhatsApp URL')

    # SEO
    meta_title = models.CharField(max_length=255, null=True, blank=True)
    meta_description = models.CharField(max_length=500, null=True, blank=True)
    meta_keywords = models.CharField(max_length=500, null=True, blank=True)
    meta_image = models.URLField(max_length=1000, null=True, blank=True)

    # Contact page hero
    hero_desktop_image_url = models.URLField(max_length=1000, null=True, blank=True)
    hero_mobile_image_url = models.URLField(max_length=1000, null=True, blank=True)
    hero_title = models.CharField(max_length=255, null=True, blank=True)
    hero_tagline = models.CharField(max_length=255, null=True, blank=True)
    hero_subtitle = models.CharField(max_length=500, null=True, blank=True)
    hero_highlight_color = models.CharField(max_length=20, null=True, blank=True)

    # Contact form
    form_title = models.CharField(max_length=255, null=True, blank=True)
    form_description = models.CharField(max_length=500, null=True, blank=True)
    gmaps_place_query = models.CharField(max_length=500, null=True, blank=True)
    location_options = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Location Options',
        help_text='Choices offered in the contact form location field'
    )

    # Branding
    logo_url = models.URLField(max_length=1000, null=True, blank=True)
    logo_white_url = models.URLField(max_length=1000, null=True, blank=True)

    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated At')

    class Meta:
        db_table = 'contact_info'
        verbose_name = 'Contact Information'
        verbose_name_plural = 'Contact Information'

    def __str__(self):
        return f"{self.phone} / {self.email}"


class SiteSettings(SingletonModel):
    """Brand name and analytics IDs used by every page."""

    brand_name = models.CharField(max_length=255, null=True, blank=True, verbose_name='Brand Name')
    google_analytics_id = models.CharField(max_length=50, null=True, blank=True, verbose_name='Google Analytics ID')
    google_tag_manager_id = models.CharField(max_length=50, null=True, blank=True, verbose_name='Google Tag Manager ID')

    class Meta:
        db_table = 'site_settings'
        verbose_name = 'Site Settings'
        verbose_name_plural = 'Site Settings'

    def __str__(self):
        return self.brand_name or 'Site Settings'

    @classmethod
    def defaults(cls):
        return {'brand_name': 'GWM Indonesia'}
