"""
Tests for the error envelope, validation messages, role permissions
and throttle defaults.
"""

import pytest
from unittest.mock import MagicMock
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.http import Http404
from rest_framework import serializers
from rest_framework.exceptions import ValidationError as DRFValidationError

from apps.core.exceptions import (
    DuplicateError,
    ErrorCode,
    NotFoundError,
    ValidationError,
    created_response,
    flatten_errors,
    showroom_exception_handler,
    success_response,
    validation_message,
)
from apps.core.models import EditorProfile
from apps.core.permissions import IsAdmin, IsEditor, IsViewer, get_user_role
from apps.core.throttling import BurstThrottle, ContactSubmissionThrottle

User = get_user_model()


def handle(exc, request_id='req-1'):
    request = MagicMock(request_id=request_id)
    return showroom_exception_handler(exc, {'request': request})


# ============================================================================
# Exception handler
# ============================================================================

class TestExceptionHandler:

    def test_showroom_exception(self):
        response = handle(NotFoundError("Car model with ID 'x' not found"))

        assert response.status_code == 404
        assert response.data == {
            'success': False,
            'error': {'code': 'NOT_FOUND', 'message': "Car model with ID 'x' not found"},
            'request_id': 'req-1',
        }

    def test_field_and_details_included(self):
        exc = ValidationError("Missing required fields: title", code=ErrorCode.MISSING_FIELD,
                              field='title', details={'missing': ['title']})
        error = handle(exc).data['error']

        assert error['code'] == 'MISSING_FIELD'
        assert error['field'] == 'title'
        assert error['details'] == {'missing': ['title']}

    def test_duplicate_is_conflict(self):
        assert handle(DuplicateError("exists")).status_code == 409

    def test_drf_validation_error_enumerated(self):
        exc = DRFValidationError({'name': ['This field is required.'], 'price': ['Not a number.']})
        response = handle(exc)

        assert response.status_code == 400
        assert response.data['error']['message'] == (
            "name: This field is required.; price: Not a number."
        )

    def test_django_validation_error(self):
        response = handle(DjangoValidationError({'hex': ['Invalid colour']}))
        assert response.status_code == 400
        assert response.data['error']['message'] == 'hex: Invalid colour'

    def test_http404(self):
        response = handle(Http404())
        assert response.status_code == 404
        assert response.data['error']['message'] == 'Resource not found'

    def test_integrity_error_is_conflict(self):
        response = handle(IntegrityError("UNIQUE constraint failed"))
        assert response.status_code == 409
        assert response.data['error']['code'] == 'INTEGRITY_ERROR'

    def test_unhandled_is_generic_500(self):
        response = handle(RuntimeError("secret internals"))

        assert response.status_code == 500
        assert response.data['error']['message'] == 'An unexpected error occurred'
        assert 'secret' not in str(response.data)


# ============================================================================
# Messages and success helpers
# ============================================================================

class TestMessages:

    def test_flatten_nested(self):
        errors = {
            'cards': [{'title': ['Required']}, {}],
            'non_field_errors': ['Bad payload'],
        }
        assert flatten_errors(errors) == ['cards[0].title: Required', 'Bad payload']

    def test_flatten_index_keyed_dicts(self):
        # Current DRF reports list item errors as {index: errors}
        errors = {
            'sections': {1: {'type_specific_data': {'cards': ['Too many']}}},
            'gallery': {'0': {'alt': ['Required']}},
        }
        assert flatten_errors(errors) == [
            'sections[1].type_specific_data.cards: Too many',
            'gallery[0].alt: Required',
        ]

    def test_serializer_list_errors_use_brackets(self):
        class Item(serializers.Serializer):
            name = serializers.CharField()

        class Payload(serializers.Serializer):
            items = Item(many=True)

        serializer = Payload(data={'items': [{'name': 'ok'}, {}]})
        assert not serializer.is_valid()
        assert validation_message(serializer.errors) == 'items[1].name: This field is required.'

    def test_empty_message(self):
        assert validation_message({}) == 'Validation failed'

    def test_success_response_merges_dict(self):
        response = success_response({'article': {'id': 1}}, message='Done')
        assert response.data == {'success': True, 'article': {'id': 1}, 'message': 'Done'}

    def test_success_response_wraps_list(self):
        assert success_response([1, 2]).data == {'success': True, 'data': [1, 2]}

    def test_created_response(self):
        assert created_response({'id': 3}).status_code == 201


# ============================================================================
# Permissions
# ============================================================================

@pytest.fixture
def make_user(db):
    def _make(role=None, superuser=False):
        if superuser:
            return User.objects.create_superuser(username='root', password='x', email='root@example.com')
        user = User.objects.create_user(username=f'user-{role}', password='x')
        if role is not None:
            user.editor_profile.role = role
            user.editor_profile.save()
        return user
    return _make


def allowed(permission, user):
    request = MagicMock(user=user, path='/api/x/')
    return permission().has_permission(request, None)


@pytest.mark.django_db
class TestPermissions:

    def test_new_users_are_editors(self, make_user):
        assert get_user_role(make_user()) == 'editor'

    def test_superuser_is_admin(self, make_user):
        assert get_user_role(make_user(superuser=True)) == 'admin'

    def test_missing_profile_is_viewer(self, make_user):
        user = make_user()
        EditorProfile.objects.filter(user=user).delete()
        assert get_user_role(user) == 'viewer'

    @pytest.mark.parametrize('role,viewer,editor,admin', [
        ('viewer', True, False, False),
        ('editor', True, True, False),
        ('admin', True, True, True),
    ])
    def test_role_matrix(self, make_user, role, viewer, editor, admin):
        user = make_user(role)
        assert allowed(IsViewer, user) is viewer
        assert allowed(IsEditor, user) is editor
        assert allowed(IsAdmin, user) is admin

    def test_anonymous_denied(self):
        anonymous = MagicMock(is_authenticated=False)
        assert allowed(IsViewer, anonymous) is False


# ============================================================================
# Throttles
# ============================================================================

class TestThrottles:

    def test_scopes(self):
        assert ContactSubmissionThrottle.scope == 'contact'
        assert BurstThrottle.scope == 'burst'

    def test_contact_keyed_by_ip_for_signed_in_users(self):
        throttle = ContactSubmissionThrottle()
        request = MagicMock()
        request.user.is_authenticated = True
        request.META = {'REMOTE_ADDR': '10.0.0.7'}
        throttle.get_ident = MagicMock(return_value='10.0.0.7')

        assert throttle.get_cache_key(request, None) == 'throttle_contact_10.0.0.7'
