"""
Tests for the contact lead API endpoints.
"""

import pytest
from unittest.mock import patch
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework import status

from apps.core.throttling import ContactSubmissionThrottle
from apps.leads.models import ContactSubmission

from .test_services import FORM

User = get_user_model()


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def api_client():
    return APIClient()


def client_with_role(role):
    user = User.objects.create_user(username=role, password='testpass123')
    user.editor_profile.role = role
    user.editor_profile.save()
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def viewer_client(db):
    return client_with_role('viewer')


@pytest.fixture
def editor_client(db):
    return client_with_role('editor')


@pytest.fixture
def admin_client(db):
    return client_with_role('admin')


@pytest.fixture
def recaptcha_ok():
    with patch('apps.leads.services.verify_recaptcha', return_value=True) as mock_verify:
        yield mock_verify


@pytest.fixture
def submission(db):
    return ContactSubmission.objects.create(
        **{k: v for k, v in FORM.items() if k != 'recaptcha_token'}
    )


# ============================================================================
# Public form
# ============================================================================

@pytest.mark.django_db
class TestSubmit:

    URL = '/api/contact/'

    def test_submit(self, api_client, recaptcha_ok):
        response = api_client.post(self.URL, FORM, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data == {'success': True, 'message': 'Form submitted successfully'}
        assert ContactSubmission.objects.get().status == 'new'

    def test_missing_fields(self, api_client, recaptcha_ok):
        response = api_client.post(self.URL, {**FORM, 'email': ''}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'All fields are required'

    def test_bad_email(self, api_client, recaptcha_ok):
        response = api_client.post(self.URL, {**FORM, 'email': 'budi'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'].startswith('email:')

    def test_recaptcha_failed(self, api_client):
        with patch('apps.leads.services.verify_recaptcha', return_value=False):
            response = api_client.post(self.URL, FORM, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'reCAPTCHA verification failed. Please try again.'

    def test_throttled(self, api_client, recaptcha_ok):
        cache.clear()
        with patch.object(ContactSubmissionThrottle, 'rate', '2/minute', create=True):
            codes = [api_client.post(self.URL, FORM, format='json').status_code for _ in range(3)]

        assert codes == [201, 201, 429]
        assert ContactSubmission.objects.count() == 2
        cache.clear()


# ============================================================================
# Dashboard
# ============================================================================

@pytest.mark.django_db
class TestSubmissions:

    def test_list_requires_auth(self, api_client, submission):
        assert api_client.get('/api/contact/submissions/').status_code == status.HTTP_401_UNAUTHORIZED

    def test_viewer_can_list(self, viewer_client, submission):
        response = viewer_client.get('/api/contact/submissions/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['submissions'][0]['email'] == 'budi@example.com'

    def test_update_status(self, editor_client, submission):
        url = f'/api/contact/submissions/{submission.pk}/status/'
        response = editor_client.patch(url, {'status': 'contacted'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['submission']['status'] == 'contacted'

    def test_invalid_status(self, editor_client, submission):
        url = f'/api/contact/submissions/{submission.pk}/status/'
        response = editor_client.patch(url, {'status': 'archived'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['message'] == 'Invalid status value'

    def test_viewer_cannot_update(self, viewer_client, submission):
        url = f'/api/contact/submissions/{submission.pk}/status/'
        response = viewer_client.patch(url, {'status': 'contacted'}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_editor_cannot_delete(self, editor_client, submission):
        response = editor_client.delete(f'/api/contact/submissions/{submission.pk}/')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_deletes(self, admin_client, submission):
        response = admin_client.delete(f'/api/contact/submissions/{submission.pk}/')

        assert response.status_code == status.HTTP_200_OK
        assert ContactSubmission.objects.count() == 0

    def test_delete_unknown(self, admin_client, db):
        response = admin_client.delete('/api/contact/submissions/999/')
        assert response.status_code == status.HTTP_404_NOT_FOUND
