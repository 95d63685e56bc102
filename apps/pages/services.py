"""
Site page services.

Homepage, about us, contact info and site settings. Each page is a
single editable record; reads initialise it with default content the
first time. Images a save stops referencing are purged after commit.
"""

import logging
from typing import Optional

from django.db import transaction

from apps.articles.sanitizer import sanitize_html
from apps.core.exceptions import NotFoundError
from apps.storage.lifecycle import find_orphaned_images, find_replaced_urls, purge_after_commit

from .models import AboutUs, ContactInfo, HomepageConfig, HomepageSection, SiteSettings
from .sections import section_from_row

logger = logging.getLogger(__name__)


HOMEPAGE_FIELDS = (
    'hero_desktop_image_url',
    'hero_mobile_image_url',
    'hero_title',
    'hero_subtitle',
    'hero_primary_button_text',
    'hero_primary_button_link',
    'hero_secondary_button_text',
    'hero_secondary_button_link',
    'meta_title',
    'meta_description',
)

ABOUT_US_DEFAULTS = {
    'title': 'About GWM Indonesia',
    'content': (
        '<h2>Welcome to GWM Indonesia</h2>'
        '<p>Great Wall Motor (GWM) Indonesia is dedicated to bringing innovative '
        'automotive solutions to the Indonesian market.</p>'
        '<h3>Commitment to Sustainability</h3>'
        '<p>Our range of new energy vehicles reflects our commitment to a greener future.</p>'
    ),
    'mission': (
        'To provide innovative and sustainable mobility solutions that enhance '
        'the quality of life for all Indonesians.'
    ),
    'vision': 'To become the leading provider of new energy vehicles in Indonesia.',
    'image_url': 'https://gwm.kopimap.com/about-us-banner.jpg',
    'image_alt': 'GWM Indonesia headquarters with modern vehicle lineup',
}

CONTACT_INFO_DEFAULTS = {
    'phone': '+62 877 7437 7422',
    'email': 'info@gwmindonesia.co.id',
    'address': 'Jl. Gatot Subroto Kav. 36-38, Jakarta Selatan',
    'facebook': 'https://facebook.com/gwmindonesia',
    'instagram': 'https://instagram.com/indo.tank',
    'x': 'https://twitter.com/gwmindonesia',
    'youtube': 'https://youtube.com/gwmindonesia',
    'whatsapp_url': 'https://wa.me/6287884818135',
    'meta_title': 'Kontak GWM Indonesia - Hubungi Kami',
    'meta_description': (
        'Hubungi GWM Indonesia untuk informasi produk, test drive, atau layanan purna jual.'
    ),
    'meta_keywords': 'kontak GWM, dealer GWM, test drive GWM, Great Wall Motors Indonesia',
    'meta_image': 'https://gwm.kopimap.com/kontak_banner.jpg',
    'hero_desktop_image_url': 'https://gwm.kopimap.com/kontak.webp',
    'hero_mobile_image_url': 'https://gwm.kopimap.com/kontak.webp',
    'hero_title': 'Hubungi Kami',
    'hero_tagline': 'GWM Jakarta',
    'hero_subtitle': 'Diskusikan kebutuhan mobil Anda dengan tim kami yang siap membantu',
    'hero_highlight_color': '#CF0E0E',
    'form_title': 'Kontak GWM Jakarta',
    'form_description': 'Dealer resmi GWM Jakarta siap membantu kebutuhan mobil Anda',
    'gmaps_place_query': 'AGORA+Mall,+Jalan+M.H.+Thamrin,+Jakarta,+Indonesia',
    'location_options': ['Jakarta', 'Surabaya', 'Bandung', 'Bali', 'Lainnya'],
}

CONTACT_INFO_FIELDS = tuple(CONTACT_INFO_DEFAULTS) + ('logo_url', 'logo_white_url')

CONTACT_INFO_IMAGE_FIELDS = (
    'meta_image',
    'hero_desktop_image_url',
    'hero_mobile_image_url',
    'logo_url',
    'logo_white_url',
)

SITE_SETTINGS_FIELDS = ('brand_name', 'google_analytics_id', 'google_tag_manager_id')


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _section_image_urls(sections) -> list:
    urls = []
    for section in sections:
        urls.extend(section_from_row(section).image_urls())
    return urls


# =============================================================================
# Homepage
# =============================================================================

class HomepageService:
    """Homepage hero plus its ordered list of sections."""

    def __init__(self, storage=None):
        self.storage = storage

    def get_homepage(self) -> Optional[HomepageConfig]:
        return (
            HomepageConfig.objects
            .filter(pk=HomepageConfig.SINGLETON_ID)
            .prefetch_related('sections')
            .first()
        )

    def update_homepage(self, data: dict) -> HomepageConfig:
        """
        Replace the homepage.

        ``data`` is validated ``HomepageUpdateSerializer`` output: each
        entry in ``sections`` carries its parsed variant under ``section``.
        The config is upserted and every section replaced in one
        transaction, so readers see either the old page or the new one.
        """
        values = {name: data.get(name) for name in HOMEPAGE_FIELDS}
        sections = data.get('sections') or []

        with transaction.atomic():
            config = (
                HomepageConfig.objects
                .select_for_update()
                .filter(pk=HomepageConfig.SINGLETON_ID)
                .first()
            )
            if config is None:
                old_images = []
                config = HomepageConfig(pk=HomepageConfig.SINGLETON_ID)
            else:
                old_images = config.hero_image_urls() + _section_image_urls(config.sections.all())

            for name, value in values.items():
                setattr(config, name, value)
            config.save()

            config.sections.all().delete()
            rows = HomepageSection.objects.bulk_create([
                HomepageSection(
                    config=config,
                    order=index,
                    section_type=entry['section_type'],
                    title=entry['title'],
                    subtitle=_blank_to_none(entry.get('subtitle')),
                    type_specific_data=entry['section'].to_data(),
                )
                for index, entry in enumerate(sections)
            ])

            new_images = config.hero_image_urls() + _section_image_urls(rows)
            purge_after_commit(self.storage, find_replaced_urls(old_images, new_images))

        logger.info("Homepage saved with %d section(s)", len(rows))
        return self.get_homepage()


# =============================================================================
# About us
# =============================================================================

class AboutUsService:

    def __init__(self, storage=None):
        self.storage = storage

    def get(self) -> AboutUs:
        about = AboutUs.objects.order_by('pk').first()
        if about is None:
            about = AboutUs.objects.create(**ABOUT_US_DEFAULTS)
            logger.info("Initialised about us content")
        return about

    def update(self, data: dict):
        """
        Save the about-us page. Returns ``(about, created)``.

        ``id`` 0 creates the row; any other id must exist.
        """
        values = {
            'title': data['title'],
            'content': sanitize_html(data['content']),
            'mission': _blank_to_none(data.get('mission')),
            'vision': _blank_to_none(data.get('vision')),
            'image_url': _blank_to_none(data.get('image_url')),
            'image_alt': _blank_to_none(data.get('image_alt')),
        }

        if not data.get('id'):
            about = AboutUs.objects.create(**values)
            logger.info("Created about us content %s", about.pk)
            return about, True

        about = AboutUs.objects.filter(pk=data['id']).first()
        if about is None:
            raise NotFoundError("About us content not found")

        orphans = find_orphaned_images(
            about.content, values['content'],
            about.image_url, values['image_url'],
        )
        for name, value in values.items():
            setattr(about, name, value)

        with transaction.atomic():
            about.save()
            purge_after_commit(self.storage, orphans)

        logger.info("Updated about us content %s", about.pk)
        return about, False


# =============================================================================
# Contact info
# =============================================================================

class ContactInfoService:

    def __init__(self, storage=None):
        self.storage = storage

    def get(self) -> ContactInfo:
        info = ContactInfo.objects.order_by('pk').first()
        if info is None:
            info = ContactInfo.objects.create(**CONTACT_INFO_DEFAULTS)
            logger.info("Initialised contact information")
        return info

    def update(self, data: dict):
        """Save contact info. Returns ``(info, created)``; ``id`` 0 creates."""
        values = {name: _blank_to_none(data[name]) for name in CONTACT_INFO_FIELDS if name in data}
        if 'location_options' in values and values['location_options'] is None:
            values['location_options'] = []

        if not data.get('id'):
            info = ContactInfo.objects.create(**values)
            logger.info("Created contact information %s", info.pk)
            return info, True

        info = ContactInfo.objects.filter(pk=data['id']).first()
        if info is None:
            raise NotFoundError("Contact information not found")

        old_images = [getattr(info, name) for name in CONTACT_INFO_IMAGE_FIELDS]
        for name, value in values.items():
            setattr(info, name, value)
        new_images = [getattr(info, name) for name in CONTACT_INFO_IMAGE_FIELDS]

        with transaction.atomic():
            info.save()
            purge_after_commit(self.storage, find_replaced_urls(old_images, new_images))

        logger.info("Updated contact information %s", info.pk)
        return info, False


# =============================================================================
# Site settings
# =============================================================================

class SiteSettingsService:

    def get(self) -> SiteSettings:
        return SiteSettings.load_or_initialize()

    def update(self, data: dict) -> SiteSettings:
        """Empty strings are stored as null."""
        settings_row = SiteSettings.load_or_initialize()
        for name in SITE_SETTINGS_FIELDS:
            if name in data:
                setattr(settings_row, name, _blank_to_none(data[name]))
        settings_row.save()
        logger.info("Updated site settings")
        return settings_row


def seed_site_pages() -> dict:
    """Initialise every page record that does not exist yet. Returns ``{name: created}``."""
    created = {}

    created['homepage'] = HomepageConfig.load() is None
    HomepageConfig.load_or_initialize()

    created['about_us'] = not AboutUs.objects.exists()
    AboutUsService().get()

    created['contact_info'] = not ContactInfo.objects.exists()
    ContactInfoService().get()

    created['site_settings'] = SiteSettings.load() is None
    SiteSettings.load_or_initialize()

    return created
