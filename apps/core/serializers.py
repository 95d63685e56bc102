"""
Serializers for authentication and editor profiles.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import EditorProfile

User = get_user_model()


class EditorProfileSerializer(serializers.ModelSerializer):
    """Serializer for EditorProfile model."""

    class Meta:
        model = EditorProfile
        fields = [
            'id',
            'role',
            'last_active_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User with nested profile."""

    profile = EditorProfileSerializer(source='editor_profile', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'is_active',
            'date_joined',
            'last_login',
            'profile',
        ]
        read_only_fields = ['id', 'date_joined', 'last_login', 'is_active']


class UserUpdateSerializer(serializers.ModelSerializer):
    """Serializer for updating user info."""

    class Meta:
        model = User
        fields = ['first_name', 'last_name', 'email']


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Custom token serializer that includes user info in response.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        token['username'] = user.username
        token['email'] = user.email

        if hasattr(user, 'editor_profile'):
            token['role'] = user.editor_profile.role

        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        return data
