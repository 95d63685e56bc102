"""
Car model catalog service.

Admin CRUD plus the published-only reads used by the public site.
Images a save replaces are deleted from object storage after commit.
"""

import logging
from typing import List, Optional

from django.db import IntegrityError, transaction
from django.utils.text import slugify

from apps.core.exceptions import DuplicateError, NotFoundError, ValidationError
from apps.storage.lifecycle import find_replaced_urls, purge_after_commit

from .models import CarModel

logger = logging.getLogger(__name__)


DEFAULT_COLOR_HEX = '#000000'
DEFAULT_COLOR_BACKGROUND = '#f5f5f5'

# Collide with the /published/ and /search/ list routes
RESERVED_IDS = ('published', 'search')

EDITABLE_FIELDS = (
    'name',
    'featured_image',
    'subheader',
    'price',
    'sub_image',
    'features',
    'description',
    'main_product_image',
    'colors',
    'gallery',
    'specifications',
    'category',
    'category_display',
    'published',
)


def generate_model_id(name: str) -> str:
    """``"Tank 300 HEV"`` -> ``"tank-300-hev"``."""
    return slugify(name or '')


def normalize_colors(colors) -> list:
    """Fill in default hex/background and drop empty image URLs."""
    normalized = []
    for color in colors or []:
        entry = {
            'name': color.get('name'),
            'hex': color.get('hex') or DEFAULT_COLOR_HEX,
            'backgroundColor': color.get('backgroundColor') or DEFAULT_COLOR_BACKGROUND,
        }
        if color.get('imageUrl'):
            entry['imageUrl'] = color['imageUrl']
        normalized.append(entry)
    return normalized


def _plain(value):
    """Nested serializer output (OrderedDicts) as plain JSON-ready structures."""
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


class CarModelService:
    """
    CRUD for car models.

    Args:
        storage: ObjectStorage used to delete replaced images. None
            disables cleanup.
    """

    def __init__(self, storage=None):
        self.storage = storage

    @staticmethod
    def _not_found(model_id):
        return NotFoundError(f"Car model with ID '{model_id}' not found")

    def _prepare(self, data: dict) -> dict:
        values = {name: _plain(data[name]) for name in EDITABLE_FIELDS if name in data}
        if 'colors' in values:
            values['colors'] = normalize_colors(values['colors'])
        if 'sub_image' in values and not values['sub_image']:
            values['sub_image'] = None
        for name in ('gallery', 'specifications'):
            if name in values and values[name] is None:
                values[name] = []
        return values

    # -------------------------------------------------------------------------
    # Admin reads
    # -------------------------------------------------------------------------

    def list_all(self) -> List[CarModel]:
        return list(CarModel.objects.order_by('name'))

    def get(self, model_id: str) -> CarModel:
        model = CarModel.objects.filter(pk=model_id).first()
        if model is None:
            raise self._not_found(model_id)
        return model

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        published_only: bool = False,
    ) -> List[CarModel]:
        """Name substring (case-insensitive), exact category, optional published filter."""
        queryset = CarModel.objects.all()
        query = (query or '').strip()
        if query:
            queryset = queryset.filter(name__icontains=query)
        if category:
            queryset = queryset.filter(category=category)
        if published_only:
            queryset = queryset.filter(published=True)
        return list(queryset.order_by('name'))

    # -------------------------------------------------------------------------
    # Public reads
    # -------------------------------------------------------------------------

    def list_published(self) -> List[CarModel]:
        return list(CarModel.objects.filter(published=True).order_by('name'))

    def get_published(self, model_id: str) -> CarModel:
        model = CarModel.objects.filter(pk=model_id, published=True).first()
        if model is None:
            raise self._not_found(model_id)
        return model

    def list_published_by_category(self, category: str) -> List[CarModel]:
        if not category or not category.strip():
            raise ValidationError("Invalid category", field='category')
        return list(
            CarModel.objects.filter(published=True, category=category.strip()).order_by('name')
        )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, data: dict) -> CarModel:
        """
        Create a car model.

        The ID is the supplied ``id`` or, when blank, the slug of the name.
        """
        model_id = (data.get('id') or '').strip() or generate_model_id(data.get('name'))
        if not model_id:
            raise ValidationError("Model ID could not be derived from the name", field='name')
        if model_id in RESERVED_IDS:
            raise ValidationError(f"'{model_id}' is reserved and cannot be used as a model ID", field='id')

        if CarModel.objects.filter(pk=model_id).exists():
            raise DuplicateError(f"Car model with ID '{model_id}' already exists", field='id')

        model = CarModel(id=model_id, **self._prepare(data))
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as exc:
            raise DuplicateError(f"Car model with ID '{model_id}' already exists", field='id') from exc

        logger.info("Created car model %s", model_id)
        return model

    def update(self, model_id: str, data: dict) -> CarModel:
        """Update the supplied fields; images no longer referenced are purged after commit."""
        model = self.get(model_id)
        old_images = model.image_urls()

        for name, value in self._prepare(data).items():
            setattr(model, name, value)

        with transaction.atomic():
            model.save()
            replaced = find_replaced_urls(old_images, model.image_urls())
            if replaced:
                logger.info("Car model %s replaced %d image(s)", model_id, len(replaced))
                purge_after_commit(self.storage, replaced)

        logger.info("Updated car model %s", model_id)
        return model

    def delete(self, model_id: str) -> None:
        deleted, _ = CarModel.objects.filter(pk=model_id).delete()
        if not deleted:
            raise self._not_found(model_id)
        logger.info("Deleted car model %s", model_id)

