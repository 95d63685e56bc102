"""
Tests for the storage API endpoints.
"""

import pytest
from unittest.mock import MagicMock, patch
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework import status

from apps.storage.client import ObjectStorage

User = get_user_model()


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def editor(db):
    return User.objects.create_user(username='editor', password='testpass123')


@pytest.fixture
def viewer(db):
    user = User.objects.create_user(username='viewer', password='testpass123')
    user.editor_profile.role = 'viewer'
    user.editor_profile.save()
    return user


@pytest.fixture
def editor_client(api_client, editor):
    api_client.force_authenticate(user=editor)
    return api_client


@pytest.fixture
def s3():
    client = MagicMock()
    client.generate_presigned_url.return_value = 'https://signed.example.com/put'
    return client


@pytest.fixture
def storage(s3):
    storage = ObjectStorage(client=s3, bucket='showroom-test', public_url='https://media.example.com')
    with patch('apps.storage.views.get_object_storage', return_value=storage):
        yield storage


# ============================================================================
# Upload URL
# ============================================================================

class TestUploadUrlEndpoint:

    URL = '/api/storage/upload-url/'

    def test_requires_authentication(self, api_client, db):
        response = api_client.post(self.URL, {'file_name': 'a.png', 'file_type': 'image/png'}, format='json')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_viewer_forbidden(self, api_client, viewer, storage):
        api_client.force_authenticate(user=viewer)
        response = api_client.post(self.URL, {'file_name': 'a.png', 'file_type': 'image/png'}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_issues_ticket(self, editor_client, storage):
        response = editor_client.post(self.URL, {'file_name': 'a.png', 'file_type': 'image/png'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['object_key'] == 'images/a.png'
        assert response.data['public_url'] == 'https://media.example.com/images/a.png'
        assert response.data['presigned_url'] == 'https://signed.example.com/put'

    def test_unique_name(self, editor_client, storage):
        response = editor_client.post(
            self.URL,
            {'file_name': 'a.png', 'file_type': 'image/png', 'unique_name': True},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data['object_key'] != 'images/a.png'
        assert response.data['object_key'].endswith('.png')

    def test_invalid_name(self, editor_client, storage):
        response = editor_client.post(self.URL, {'file_name': 'a<b>.png', 'file_type': 'image/png'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['error']['message'] == "Invalid file name format or length."

    def test_missing_fields_enumerated(self, editor_client, storage):
        response = editor_client.post(self.URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        message = response.data['error']['message']
        assert 'file_name' in message
        assert 'file_type' in message


# ============================================================================
# Delete
# ============================================================================

class TestDeleteEndpoint:

    URL = '/api/storage/delete/'

    def test_deletes_image_and_variant(self, editor_client, storage, s3):
        response = editor_client.post(
            self.URL, {'image_url': 'https://media.example.com/images/a.png'}, format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['deleted'] == ['images/a.png', 'images/a_mobile.png']

    def test_single_object(self, editor_client, storage, s3):
        response = editor_client.post(
            self.URL,
            {'image_url': 'https://media.example.com/files/a.pdf', 'include_variants': False},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        s3.delete_object.assert_called_once_with(Bucket='showroom-test', Key='files/a.pdf')

    def test_unknown_url(self, editor_client, storage):
        response = editor_client.post(self.URL, {'image_url': 'https://other.com/a.png'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_storage_failure_is_bad_gateway(self, editor_client, storage, s3):
        from botocore.exceptions import ClientError
        s3.delete_object.side_effect = ClientError({'Error': {'Code': 'InternalError'}}, 'DeleteObject')

        response = editor_client.post(
            self.URL, {'image_url': 'https://media.example.com/images/a.png'}, format='json',
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.data['error']['code'] == 'EXTERNAL_SERVICE_ERROR'
