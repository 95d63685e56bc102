"""
Tests for health checks, JWT auth endpoints and the request ID middleware.
"""

import logging
import uuid

import pytest
from unittest.mock import patch
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.core.middleware import RequestIDFilter, current_request_id, resolve_request_id
from apps.core.observability import HealthCheckResult, HealthStatus

User = get_user_model()


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def editor(db):
    return User.objects.create_user(
        username='editor', password='testpass123', email='editor@example.com',
    )


def login(client, username='editor', password='testpass123'):
    return client.post(
        '/api/auth/login/',
        {'username': username, 'password': password},
        format='json',
    )


# ============================================================================
# Health
# ============================================================================

@pytest.mark.django_db
class TestHealth:

    def test_livez(self, api_client):
        response = api_client.get('/livez/')
        assert response.status_code == 200
        assert response.json() == {'status': 'alive'}

    def test_readyz(self, api_client):
        response = api_client.get('/readyz/')
        assert response.status_code == 200
        assert response.json() == {'status': 'ready'}

    def test_readyz_database_down(self, api_client):
        down = HealthCheckResult(name='database', status=HealthStatus.UNHEALTHY, message='Database error: gone')
        with patch('apps.core.views.health_checker.check', return_value=down):
            response = api_client.get('/readyz/')
        assert response.status_code == 503
        assert response.json()['status'] == 'not_ready'

    def test_health_all(self, api_client):
        response = api_client.get('/health/')
        body = response.json()

        assert response.status_code == 200
        assert set(body['checks']) >= {'database', 'cache', 'object_storage'}
        assert body['checks']['database']['status'] == 'healthy'

    def test_health_unknown_check(self, api_client):
        response = api_client.get('/health/nope/')
        assert response.status_code == 503
        assert response.json()['message'] == 'Unknown check: nope'


# ============================================================================
# Auth
# ============================================================================

@pytest.mark.django_db
class TestAuth:

    def test_login_returns_tokens_and_user(self, api_client, editor):
        response = login(api_client)

        assert response.status_code == 200
        assert 'access' in response.data
        assert 'refresh' in response.data
        assert response.data['user']['username'] == 'editor'
        assert response.data['user']['profile']['role'] == 'editor'

    def test_login_bad_password(self, api_client, editor):
        response = login(api_client, password='wrong')
        assert response.status_code == 401
        assert response.data['success'] is False

    def test_me_requires_auth(self, api_client):
        response = api_client.get('/api/auth/me/')
        assert response.status_code == 401

    def test_me_with_bearer_token(self, api_client, editor):
        access = login(api_client).data['access']
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')

        response = api_client.get('/api/auth/me/')

        assert response.status_code == 200
        assert response.data['email'] == 'editor@example.com'

    def test_me_patch(self, api_client, editor):
        api_client.force_authenticate(user=editor)
        response = api_client.patch('/api/auth/me/', {'first_name': 'Rina'}, format='json')

        assert response.status_code == 200
        assert response.data['first_name'] == 'Rina'
        editor.editor_profile.refresh_from_db()
        assert editor.editor_profile.last_active_at is not None

    def test_logout_blacklists_refresh(self, api_client, editor):
        tokens = login(api_client).data
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")

        response = api_client.post('/api/auth/logout/', {'refresh': tokens['refresh']}, format='json')
        assert response.status_code == 200
        assert response.data['message'] == 'Successfully logged out'

        response = api_client.post('/api/auth/refresh/', {'refresh': tokens['refresh']}, format='json')
        assert response.status_code == 401

    def test_logout_requires_token(self, api_client, editor):
        api_client.force_authenticate(user=editor)
        response = api_client.post('/api/auth/logout/', {}, format='json')

        assert response.status_code == 400
        assert response.data['error']['field'] == 'refresh'


# ============================================================================
# Request ID
# ============================================================================

@pytest.mark.django_db
class TestRequestId:

    def test_generated_when_absent(self, api_client):
        response = api_client.get('/livez/')
        request_id = response['X-Request-ID']
        assert str(uuid.UUID(request_id)) == request_id

    def test_incoming_uuid_is_kept(self, api_client):
        incoming = str(uuid.uuid4())
        response = api_client.get('/livez/', HTTP_X_REQUEST_ID=incoming)
        assert response['X-Request-ID'] == incoming

    def test_malformed_incoming_is_replaced(self, api_client):
        response = api_client.get('/livez/', HTTP_X_REQUEST_ID='not-a-uuid')
        assert response['X-Request-ID'] != 'not-a-uuid'

    def test_error_body_carries_request_id(self, api_client):
        incoming = str(uuid.uuid4())
        response = api_client.get('/api/auth/me/', HTTP_X_REQUEST_ID=incoming)
        assert response.data['request_id'] == incoming

    def test_incoming_uuid_is_canonicalised(self):
        incoming = uuid.uuid4()
        assert resolve_request_id(str(incoming).upper()) == str(incoming)

    def test_cleared_after_request(self, api_client):
        api_client.get('/livez/')
        assert current_request_id() is None

    def test_filter_outside_request(self):
        record = logging.LogRecord('apps', logging.INFO, __file__, 1, 'msg', None, None)
        assert RequestIDFilter().filter(record) is True
        assert record.request_id == '-'

    def test_dashboard_write_is_logged(self, api_client, editor, caplog):
        caplog.set_level(logging.INFO, logger='apps.core.middleware')
        api_client.force_authenticate(user=editor)

        response = api_client.patch('/api/auth/me/', {'first_name': 'Eddie'}, format='json')

        assert response.status_code == 200
        records = [r for r in caplog.records if r.name == 'apps.core.middleware']
        assert len(records) == 1
        assert records[0].getMessage().startswith(f"PATCH /api/auth/me/ -> 200 (user={editor.pk},")
        assert records[0].request_id == response['X-Request-ID']

    def test_reads_are_not_logged(self, api_client, caplog):
        caplog.set_level(logging.INFO, logger='apps.core.middleware')
        api_client.get('/api/car-models/published/')
        assert [r for r in caplog.records if r.name == 'apps.core.middleware'] == []
