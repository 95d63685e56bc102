"""
Tests for CarModelService.
"""

import pytest
from unittest.mock import MagicMock

from apps.core.exceptions import DuplicateError, NotFoundError, ValidationError
from apps.catalog.models import CarModel
from apps.catalog.services import CarModelService, normalize_colors


IMG = 'https://media.example.com/images/'


def tank_payload(**overrides):
    data = {
        'name': 'Tank 300',
        'featured_image': IMG + 'tank-hero.webp',
        'subheader': 'Born for adventure',
        'price': 'Rp 854 Juta',
        'features': ['2.0L Turbo', '9AT'],
        'description': 'Off-road SUV',
        'main_product_image': IMG + 'tank-main.webp',
        'colors': [{'name': 'Dusk Orange', 'hex': '#c75b12', 'backgroundColor': '#fbe9dc',
                    'imageUrl': IMG + 'tank-orange.webp'}],
        'gallery': [{'imageUrl': IMG + 'tank-g1.webp', 'alt': 'Front'}],
        'specifications': [{'categoryTitle': 'Engine', 'specs': [{'key': 'Power', 'value': '220 PS'}]}],
        'category': 'suv',
        'category_display': 'SUV',
    }
    data.update(overrides)
    return data


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def storage():
    return MagicMock()


@pytest.fixture
def service(storage):
    return CarModelService(storage=storage)


@pytest.fixture
def tank(db, service):
    return service.create(tank_payload(published=True))


@pytest.fixture
def lineup(db, service):
    return [
        service.create(tank_payload(name='Tank 500', published=True)),
        service.create(tank_payload(name='Haval Jolion', category='crossover', category_display='Crossover', published=True)),
        service.create(tank_payload(name='Haval H6', category='crossover', category_display='Crossover')),
        service.create(tank_payload(name='Ora 03', category='ev', category_display='EV', published=True)),
    ]


# ============================================================================
# Create
# ============================================================================

@pytest.mark.django_db
class TestCreate:

    def test_id_from_name(self, service):
        model = service.create(tank_payload(name='Tank 300 HEV'))

        assert model.pk == 'tank-300-hev'
        assert model.published is False
        assert CarModel.objects.get(pk='tank-300-hev').specifications[0]['categoryTitle'] == 'Engine'

    def test_explicit_id(self, service):
        assert service.create(tank_payload(id='tank-300-se')).pk == 'tank-300-se'

    def test_duplicate_id(self, service, tank):
        with pytest.raises(DuplicateError) as exc:
            service.create(tank_payload())
        assert str(exc.value) == "Car model with ID 'tank-300' already exists"

    def test_reserved_id(self, service):
        with pytest.raises(ValidationError):
            service.create(tank_payload(id='published'))

    def test_unsluggable_name(self, service):
        with pytest.raises(ValidationError):
            service.create(tank_payload(name='!!!'))

    def test_color_defaults(self, service):
        model = service.create(tank_payload(colors=[{'name': 'Black', 'hex': '', 'imageUrl': ''}]))
        assert model.colors == [{'name': 'Black', 'hex': '#000000', 'backgroundColor': '#f5f5f5'}]

    def test_blank_sub_image_is_null(self, service):
        assert service.create(tank_payload(sub_image='')).sub_image is None


class TestNormalizeColors:

    def test_keeps_supplied_values(self):
        colors = [{'name': 'White', 'hex': '#ffffff', 'backgroundColor': '#eeeeee', 'imageUrl': 'x.webp'}]
        assert normalize_colors(colors) == colors

    def test_empty(self):
        assert normalize_colors(None) == []


# ============================================================================
# Update / delete
# ============================================================================

@pytest.mark.django_db
class TestUpdate:

    def test_update_fields(self, service, tank):
        model = service.update('tank-300', {'price': 'Rp 899 Juta', 'published': False})

        assert model.price == 'Rp 899 Juta'
        assert model.published is False
        assert model.name == 'Tank 300'

    def test_not_found(self, service, db):
        with pytest.raises(NotFoundError) as exc:
            service.update('nope', {'price': 'x'})
        assert str(exc.value) == "Car model with ID 'nope' not found"

    def test_replaced_images_purged_after_commit(self, service, storage, tank, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            service.update('tank-300', {
                'featured_image': IMG + 'tank-hero-v2.webp',
                'gallery': [],
            })

        purged = [c.args[0] for c in storage.delete_image.call_args_list]
        assert purged == [IMG + 'tank-hero.webp', IMG + 'tank-g1.webp']

    def test_image_moved_between_slots_is_kept(self, service, storage, tank, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            service.update('tank-300', {
                'featured_image': IMG + 'tank-main.webp',
                'main_product_image': IMG + 'tank-hero.webp',
            })

        assert callbacks == []
        storage.delete_image.assert_not_called()

    def test_delete(self, service, tank):
        service.delete('tank-300')
        assert not CarModel.objects.exists()

    def test_delete_missing(self, service, db):
        with pytest.raises(NotFoundError):
            service.delete('tank-300')


# ============================================================================
# Reads
# ============================================================================

@pytest.mark.django_db
class TestReads:

    def test_list_all_by_name(self, service, lineup):
        assert [m.name for m in service.list_all()] == ['Haval H6', 'Haval Jolion', 'Ora 03', 'Tank 500']

    def test_search(self, service, lineup):
        assert [m.name for m in service.search(query='haval')] == ['Haval H6', 'Haval Jolion']
        assert [m.name for m in service.search(query='haval', published_only=True)] == ['Haval Jolion']
        assert [m.name for m in service.search(category='ev')] == ['Ora 03']
        assert len(service.search()) == 4

    def test_published(self, service, lineup):
        assert [m.name for m in service.list_published()] == ['Haval Jolion', 'Ora 03', 'Tank 500']

    def test_get_published_hides_drafts(self, service, lineup):
        with pytest.raises(NotFoundError):
            service.get_published('haval-h6')
        assert service.get_published('haval-jolion').name == 'Haval Jolion'

    def test_by_category(self, service, lineup):
        assert [m.pk for m in service.list_published_by_category('crossover')] == ['haval-jolion']

    def test_by_blank_category(self, service, db):
        with pytest.raises(ValidationError):
            service.list_published_by_category('  ')
