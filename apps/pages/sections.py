"""
Homepage section variants.

Every ``section_type`` maps to one dataclass in ``SECTION_TYPES``. That
table is the only place section types are dispatched: payload validation,
rebuilding a section from its stored row and listing the images a
section references all go through it.

``type_specific_data`` is stored with the camelCase keys the public site
reads:

    default:             description, desktopImageUrls, mobileImageUrls,
                         imageAlt, features, primaryButtonText,
                         primaryButtonLink, secondaryButtonText,
                         secondaryButtonLink
    feature_cards_grid:  cards: [{imageUrl, title, description, link}]  (1..3)
    banner:              imageUrl, altText, link
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional

from rest_framework import serializers

MAX_FEATURE_CARDS = 3


def _optional_char(**kwargs):
    return serializers.CharField(required=False, allow_blank=True, allow_null=True, **kwargs)


# =============================================================================
# Payload validation
# =============================================================================

class DefaultSectionDataSerializer(serializers.Serializer):
    description = serializers.CharField()
    desktopImageUrls = serializers.ListField(
        child=serializers.URLField(max_length=1000),
        allow_empty=False,
    )
    mobileImageUrls = serializers.ListField(
        child=serializers.URLField(max_length=1000),
        required=False,
        default=list,
    )
    imageAlt = _optional_char(max_length=255)
    features = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    primaryButtonText = _optional_char(max_length=100)
    primaryButtonLink = _optional_char(max_length=500)
    secondaryButtonText = _optional_char(max_length=100)
    secondaryButtonLink = _optional_char(max_length=500)


class FeatureCardSerializer(serializers.Serializer):
    imageUrl = serializers.URLField(max_length=1000)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    link = _optional_char(max_length=500)


class FeatureCardsGridDataSerializer(serializers.Serializer):
    cards = FeatureCardSerializer(many=True, allow_empty=False)

    def validate_cards(self, value):
        if len(value) > MAX_FEATURE_CARDS:
            raise serializers.ValidationError(
                f"Maximum of {MAX_FEATURE_CARDS} feature cards allowed"
            )
        return value


class BannerDataSerializer(serializers.Serializer):
    imageUrl = serializers.URLField(max_length=1000)
    altText = _optional_char(max_length=255)
    link = _optional_char(max_length=500)


# =============================================================================
# Variants
# =============================================================================

@dataclass
class DefaultSection:
    """Model showcase: text, feature bullets, image carousel and two buttons."""

    section_type: ClassVar[str] = 'default'
    data_serializer: ClassVar[type] = DefaultSectionDataSerializer

    description: str
    desktop_image_urls: List[str]
    mobile_image_urls: List[str] = field(default_factory=list)
    image_alt: Optional[str] = None
    features: List[str] = field(default_factory=list)
    primary_button_text: Optional[str] = None
    primary_button_link: Optional[str] = None
    secondary_button_text: Optional[str] = None
    secondary_button_link: Optional[str] = None

    @classmethod
    def from_data(cls, data: dict) -> 'DefaultSection':
        return cls(
            description=data.get('description') or '',
            desktop_image_urls=list(data.get('desktopImageUrls') or []),
            mobile_image_urls=list(data.get('mobileImageUrls') or []),
            image_alt=data.get('imageAlt') or None,
            features=list(data.get('features') or []),
            primary_button_text=data.get('primaryButtonText') or None,
            primary_button_link=data.get('primaryButtonLink') or None,
            secondary_button_text=data.get('secondaryButtonText') or None,
            secondary_button_link=data.get('secondaryButtonLink') or None,
        )

    def to_data(self) -> dict:
        return {
            'description': self.description,
            'desktopImageUrls': self.desktop_image_urls,
            'mobileImageUrls': self.mobile_image_urls,
            'imageAlt': self.image_alt,
            'features': self.features,
            'primaryButtonText': self.primary_button_text,
            'primaryButtonLink': self.primary_button_link,
            'secondaryButtonText': self.secondary_button_text,
            'secondaryButtonLink': self.secondary_button_link,
        }

    def image_urls(self) -> List[str]:
        return self.desktop_image_urls + self.mobile_image_urls


@dataclass
class FeatureCard:
    image_url: str
    title: str
    description: str
    link: Optional[str] = None


@dataclass
class FeatureCardsGridSection:
    """Up to three image cards side by side."""

    section_type: ClassVar[str] = 'feature_cards_grid'
    data_serializer: ClassVar[type] = FeatureCardsGridDataSerializer

    cards: List[FeatureCard] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: dict) -> 'FeatureCardsGridSection':
        return cls(cards=[
            FeatureCard(
                image_url=card.get('imageUrl') or '',
                title=card.get('title') or '',
                description=card.get('description') or '',
                link=card.get('link') or None,
            )
            for card in data.get('cards') or []
        ])

    def to_data(self) -> dict:
        return {
            'cards': [
                {
                    'imageUrl': card.image_url,
                    'title': card.title,
                    'description': card.description,
                    'link': card.link,
                }
                for card in self.cards
            ],
        }

    def image_urls(self) -> List[str]:
        return [card.image_url for card in self.cards if card.image_url]


@dataclass
class BannerSection:
    """Full-width clickable image."""

    section_type: ClassVar[str] = 'banner'
    data_serializer: ClassVar[type] = BannerDataSerializer

    image_url: str
    alt_text: Optional[str] = None
    link: Optional[str] = None

    @classmethod
    def from_data(cls, data: dict) -> 'BannerSection':
        return cls(
            image_url=data.get('imageUrl') or '',
            alt_text=data.get('altText') or None,
            link=data.get('link') or None,
        )

    def to_data(self) -> dict:
        return {'imageUrl': self.image_url, 'altText': self.alt_text, 'link': self.link}

    def image_urls(self) -> List[str]:
        return [self.image_url] if self.image_url else []


SECTION_TYPES: Dict[str, type] = {
    variant.section_type: variant
    for variant in (DefaultSection, FeatureCardsGridSection, BannerSection)
}


def variant_for(section_type: str) -> type:
    try:
        return SECTION_TYPES[section_type]
    except KeyError:
        raise ValueError(f"Unknown section type: {section_type}") from None


def parse_section_data(section_type: str, data):
    """
    Validate ``type_specific_data`` for ``section_type`` and return the variant.

    Raises DRF ``ValidationError`` with the variant serializer's errors.
    """
    variant = variant_for(section_type)
    serializer = variant.data_serializer(data=data)
    serializer.is_valid(raise_exception=True)
    return variant.from_data(serializer.validated_data)


def section_from_row(section) -> object:
    """Rebuild the variant stored on a HomepageSection row."""
    return variant_for(section.section_type).from_data(section.type_specific_data or {})
