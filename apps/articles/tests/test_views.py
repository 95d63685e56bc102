"""
Tests for the article API endpoints, including the end-to-end
create -> publish -> delete flow.
"""

import pytest
from unittest.mock import MagicMock, patch
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework import status

from apps.articles.models import Article
from apps.articles.services import ArticleService

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
def editor_client(editor):
    client = APIClient()
    client.force_authenticate(user=editor)
    return client


@pytest.fixture(autouse=True)
def storage():
    storage = MagicMock()
    storage.ensure_public_domain.side_effect = lambda url: url
    with patch('apps.articles.views.get_object_storage', return_value=storage):
        yield storage


@pytest.fixture
def launch_payload():
    return {
        'title': 'GWM Tank 300 Launch',
        'content': '<p>Launch event</p>',
        'excerpt': 'Launch',
        'category': 'News',
    }


@pytest.fixture
def draft(db, launch_payload):
    return ArticleService().create(launch_payload)


@pytest.fixture
def live(db, launch_payload):
    return ArticleService().create({**launch_payload, 'title': 'Ramadan Promo', 'category': 'Promo', 'published': True})


# ============================================================================
# End-to-end
# ============================================================================

@pytest.mark.django_db
class TestArticleLifecycle:

    def test_create_publish_delete(self, editor_client, launch_payload):
        response = editor_client.post('/api/articles/', launch_payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        article = response.data['article']
        assert article['slug'] == 'gwm-tank-300-launch'
        assert article['published'] is False
        assert article['published_at'] is None

        response = editor_client.patch(f"/api/articles/{article['id']}/", {'published': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['article']['published_at'] is not None
        assert response.data['article']['slug'] == 'gwm-tank-300-launch'

        response = editor_client.delete(f"/api/articles/{article['id']}/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'message': 'Article deleted successfully'}
        assert Article.objects.count() == 0

    def test_delete_nonexistent(self, editor_client, draft):
        response = editor_client.delete('/api/articles/999999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False
        assert response.data['error']['message'] == "Article not found or could not be deleted"
        assert Article.objects.count() == 1


# ============================================================================
# Writes
# ============================================================================

@pytest.mark.django_db
class TestWrites:

    def test_anonymous_cannot_create(self, api_client, launch_payload):
        response = api_client.post('/api/articles/', launch_payload, format='json')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_viewer_cannot_create(self, api_client, viewer, launch_payload):
        api_client.force_authenticate(user=viewer)
        response = api_client.post('/api/articles/', launch_payload, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_fields(self, editor_client):
        response = editor_client.post('/api/articles/', {'title': 'Only title'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'MISSING_FIELD'
        assert response.data['error']['message'] == "Missing required fields: content, excerpt, category"

    def test_invalid_types_enumerated(self, editor_client, launch_payload):
        payload = {**launch_payload, 'featured_image_url': 'not a url', 'published': 'maybe'}
        response = editor_client.post('/api/articles/', payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        message = response.data['error']['message']
        assert 'featured_image_url:' in message
        assert 'published:' in message

    def test_put_requires_all_fields(self, editor_client, draft):
        response = editor_client.put(f'/api/articles/{draft.pk}/', {'title': 'New'}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_put_replaces(self, editor_client, draft, launch_payload):
        payload = {**launch_payload, 'title': 'Tank 300 Hybrid'}
        response = editor_client.put(f'/api/articles/{draft.pk}/', payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['article']['slug'] == 'tank-300-hybrid'

    def test_update_nonexistent(self, editor_client, db):
        response = editor_client.patch('/api/articles/424242/', {'title': 'x'}, format='json')
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['message'] == "Article not found"

    def test_content_sanitized(self, editor_client, launch_payload):
        payload = {**launch_payload, 'content': '<script>alert(1)</script><p>hi</p>'}
        response = editor_client.post('/api/articles/', payload, format='json')
        assert response.data['article']['content'] == '<p>hi</p>'


# ============================================================================
# Reads
# ============================================================================

@pytest.mark.django_db
class TestReads:

    def test_anonymous_list_shows_only_published(self, api_client, draft, live):
        response = api_client.get('/api/articles/')

        assert response.status_code == status.HTTP_200_OK
        assert [a['slug'] for a in response.data['data']] == ['ramadan-promo']
        assert response.data['pagination'] == {'page': 1, 'page_size': 10, 'page_count': 1, 'total': 1}

    def test_dashboard_list_shows_drafts(self, editor_client, draft, live):
        response = editor_client.get('/api/articles/')
        assert response.data['pagination']['total'] == 2

    def test_dashboard_can_ask_for_published_only(self, editor_client, draft, live):
        response = editor_client.get('/api/articles/', {'published_only': 'true'})
        assert response.data['pagination']['total'] == 1

    def test_list_filters(self, editor_client, draft, live):
        response = editor_client.get('/api/articles/', {'category': 'News', 'search': 'TANK'})
        assert [a['id'] for a in response.data['data']] == [draft.pk]

    def test_bad_page(self, api_client, db):
        response = api_client.get('/api/articles/', {'page': 'two'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve_draft_hidden_from_public(self, api_client, draft):
        response = api_client.get(f'/api/articles/{draft.pk}/')
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_retrieve_published(self, api_client, live):
        response = api_client.get(f'/api/articles/{live.pk}/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['article']['title'] == 'Ramadan Promo'

    def test_by_slug(self, api_client, live):
        response = api_client.get('/api/articles/slug/ramadan-promo/')
        assert response.status_code == status.HTTP_200_OK
        assert response.data['article']['id'] == live.pk

    def test_by_slug_draft_visible_to_editor(self, editor_client, draft):
        response = editor_client.get('/api/articles/slug/gwm-tank-300-launch/')
        assert response.status_code == status.HTTP_200_OK

    def test_by_slug_missing(self, api_client, db):
        response = api_client.get('/api/articles/slug/nope/')
        assert response.status_code == status.HTTP_404_NOT_FOUND
