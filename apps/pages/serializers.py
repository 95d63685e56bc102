"""
Site page serializers.
"""

from rest_framework import serializers

from .models import AboutUs, ContactInfo, HomepageConfig, HomepageSection, SiteSettings
from .sections import SECTION_TYPES, parse_section_data


def _optional_char(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


def _optional_url(**kwargs):
    return serializers.URLField(required=False, allow_blank=True, allow_null=True, max_length=1000, **kwargs)


# =============================================================================
# Homepage
# =============================================================================

class HomepageSectionSerializer(serializers.ModelSerializer):

    class Meta:
        model = HomepageSection
        fields = ['id', 'order', 'section_type', 'title', 'subtitle', 'type_specific_data']
        read_only_fields = fields


class HomepageConfigSerializer(serializers.ModelSerializer):
    sections = HomepageSectionSerializer(many=True, read_only=True)

    class Meta:
        model = HomepageConfig
        fields = [
            'id',
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
            'updated_at',
            'sections',
        ]
        read_only_fields = fields


class SectionInputSerializer(serializers.Serializer):
    """One section of a homepage save; ``type_specific_data`` is checked per type."""

    section_type = serializers.ChoiceField(choices=list(SECTION_TYPES))
    title = serializers.CharField(max_length=255)
    subtitle = _optional_char(max_length=500)
    type_specific_data = serializers.DictField()

    def validate(self, attrs):
        try:
            attrs['section'] = parse_section_data(attrs['section_type'], attrs['type_specific_data'])
        except serializers.ValidationError as exc:
            raise serializers.ValidationError({'type_specific_data': exc.detail})
        return attrs


class HomepageUpdateSerializer(serializers.Serializer):
    hero_desktop_image_url = serializers.URLField(max_length=1000)
    hero_mobile_image_url = serializers.URLField(max_length=1000)
    hero_title = serializers.CharField(max_length=255)
    hero_subtitle = _optional_char()
    hero_primary_button_text = _optional_char(max_length=100)
    hero_primary_button_link = _optional_char(max_length=500)
    hero_secondary_button_text = _optional_char(max_length=100)
    hero_secondary_button_link = _optional_char(max_length=500)
    meta_title = _optional_char(max_length=255)
    meta_description = _optional_char(max_length=500)
    sections = SectionInputSerializer(many=True, required=False, default=list)


# =============================================================================
# About us
# =============================================================================

class AboutUsSerializer(serializers.ModelSerializer):

    class Meta:
        model = AboutUs
        fields = ['id', 'title', 'content', 'mission', 'vision', 'image_url', 'image_alt', 'updated_at']
        read_only_fields = fields


class AboutUsWriteSerializer(serializers.Serializer):
    """``id`` 0 creates the row; any other id updates it."""

    id = serializers.IntegerField(min_value=0)
    title = serializers.CharField(max_length=100)
    content = serializers.CharField(trim_whitespace=False)
    mission = _optional_char()
    vision = _optional_char()
    image_url = _optional_url()
    image_alt = _optional_char(max_length=200)


# =============================================================================
# Contact info
# =============================================================================

class ContactInfoSerializer(serializers.ModelSerializer):

    class Meta:
        model = ContactInfo
        fields = '__all__'
        read_only_fields = [f.name for f in ContactInfo._meta.fields]


class ContactInfoWriteSerializer(serializers.Serializer):
    """``id`` 0 creates the row; any other id updates it."""

    id = serializers.IntegerField(min_value=0)
    phone = serializers.CharField(max_length=50)
    email = serializers.EmailField(max_length=255)
    address = serializers.CharField(max_length=500)
    facebook = serializers.CharField(max_length=500)
    instagram = serializers.CharField(max_length=500)
    x = serializers.CharField(max_length=500)
    youtube = serializers.CharField(max_length=500)
    whatsapp_url = serializers.URLField(max_length=1000)

    meta_title = _optional_char(max_length=255)
    meta_description = _optional_char(max_length=500)
    meta_keywords = _optional_char(max_length=500)
    meta_image = _optional_url()

    hero_desktop_image_url = _optional_url()
    hero_mobile_image_url = _optional_url()
    hero_title = _optional_char(max_length=255)
    hero_tagline = _optional_char(max_length=255)
    hero_subtitle = _optional_char(max_length=500)
    hero_highlight_color = _optional_char(max_length=20)

    form_title = _optional_char(max_length=255)
    form_description = _optional_char(max_length=500)
    gmaps_place_query = _optional_char(max_length=500)
    location_options = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    logo_url = _optional_url()
    logo_white_url = _optional_url()


# =============================================================================
# Site settings
# =============================================================================

class SiteSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = SiteSettings
        fields = ['brand_name', 'google_analytics_id', 'google_tag_manager_id', 'updated_at']
        read_only_fields = fields


class SiteSettingsWriteSerializer(serializers.Serializer):
    brand_name = _optional_char(max_length=255)
    google_analytics_id = _optional_char(max_length=50)
    google_tag_manager_id = _optional_char(max_length=50)
