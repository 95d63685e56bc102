"""
Tests for the car model API endpoints.
"""

import pytest
from unittest.mock import MagicMock, patch
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework import status

from apps.catalog.models import CarModel
from apps.catalog.services import CarModelService

from .test_services import tank_payload

User = get_user_model()

IMG_OK = 'https://media.example.com/images/g.webp'


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def editor_client(db):
    client = APIClient()
    client.force_authenticate(user=User.objects.create_user(username='editor', password='testpass123'))
    return client


@pytest.fixture
def viewer_client(db):
    user = User.objects.create_user(username='viewer', password='testpass123')
    user.editor_profile.role = 'viewer'
    user.editor_profile.save()
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture(autouse=True)
def storage():
    storage = MagicMock()
    with patch('apps.catalog.views.get_object_storage', return_value=storage):
        yield storage


@pytest.fixture
def models(db):
    service = CarModelService()
    return [
        service.create(tank_payload(published=True)),
        service.create(tank_payload(name='Haval H6', category='crossover', category_display='Crossover')),
    ]


# ============================================================================
# Dashboard
# ============================================================================

@pytest.mark.django_db
class TestDashboard:

    def test_create(self, editor_client):
        response = editor_client.post('/api/car-models/', tank_payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['model_id'] == 'tank-300'
        assert response.data['message'] == 'Car model created successfully'
        assert response.data['car_model']['colors'][0]['hex'] == '#c75b12'

    def test_create_duplicate(self, editor_client, models):
        response = editor_client.post('/api/car-models/', tank_payload(), format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['message'] == "Car model with ID 'tank-300' already exists"

    def test_create_lists_every_violation(self, editor_client):
        payload = tank_payload(features=[], colors=[], price='')
        response = editor_client.post('/api/car-models/', payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        message = response.data['error']['message']
        for name in ('price:', 'features:', 'colors:'):
            assert name in message

    def test_nested_violation_path(self, editor_client):
        payload = tank_payload(gallery=[{'imageUrl': IMG_OK, 'alt': ''}])
        response = editor_client.post('/api/car-models/', payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'gallery[0].alt:' in response.data['error']['message']

    def test_viewer_can_read_not_write(self, viewer_client, models):
        assert viewer_client.get('/api/car-models/').status_code == status.HTTP_200_OK
        response = viewer_client.post('/api/car-models/', tank_payload(name='Ora 07'), format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_includes_drafts(self, editor_client, models):
        response = editor_client.get('/api/car-models/')
        assert [m['id'] for m in response.data['car_models']] == ['haval-h6', 'tank-300']

    def test_retrieve_missing(self, editor_client, db):
        response = editor_client.get('/api/car-models/nope/')
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['message'] == "Car model with ID 'nope' not found"

    def test_search(self, editor_client, models):
        response = editor_client.get('/api/car-models/search/', {'query': 'TANK'})
        assert [m['id'] for m in response.data['car_models']] == ['tank-300']

    def test_patch(self, editor_client, models):
        response = editor_client.patch('/api/car-models/haval-h6/', {'published': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert CarModel.objects.get(pk='haval-h6').published is True

    def test_put_requires_full_payload(self, editor_client, models):
        response = editor_client.put('/api/car-models/haval-h6/', {'price': 'x'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete(self, editor_client, models):
        response = editor_client.delete('/api/car-models/haval-h6/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Car model deleted successfully'
        assert not CarModel.objects.filter(pk='haval-h6').exists()

    def test_anonymous_cannot_list_dashboard(self, api_client, models):
        assert api_client.get('/api/car-models/').status_code == status.HTTP_401_UNAUTHORIZED


# ============================================================================
# Public site
# ============================================================================

@pytest.mark.django_db
class TestPublic:

    def test_published_list(self, api_client, models):
        response = api_client.get('/api/car-models/published/')

        assert response.status_code == status.HTTP_200_OK
        assert [m['id'] for m in response.data['car_models']] == ['tank-300']

    def test_published_by_category(self, api_client, models):
        response = api_client.get('/api/car-models/published/', {'category': 'crossover'})
        assert response.data['car_models'] == []

    def test_published_detail(self, api_client, models):
        response = api_client.get('/api/car-models/published/tank-300/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['car_model']['name'] == 'Tank 300'

    def test_draft_not_public(self, api_client, models):
        response = api_client.get('/api/car-models/published/haval-h6/')
        assert response.status_code == status.HTTP_404_NOT_FOUND
