"""
Contact lead serializers.
"""

from rest_framework import serializers
from .models import ContactSubmission


class ContactSubmissionSerializer(serializers.ModelSerializer):

    class Meta:
        model = ContactSubmission
        fields = [
            'id',
            'full_name',
            'email',
            'phone_number',
            'location',
            'car_model_interest',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class ContactFormSerializer(serializers.Serializer):
    """
    Public form payload.

    Presence is checked by ContactService so a half-filled form gets a
    single "All fields are required" message.
    """

    full_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    email = serializers.EmailField(required=False, allow_blank=True, max_length=255)
    phone_number = serializers.CharField(required=False, allow_blank=True, max_length=50)
    location = serializers.CharField(required=False, allow_blank=True, max_length=255)
    car_model_interest = serializers.CharField(required=False, allow_blank=True, max_length=255)
    recaptcha_token = serializers.CharField(required=False, allow_blank=True)


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField()
