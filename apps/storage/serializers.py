"""
Request serializers for the storage endpoints.

Only presence and types are checked here; file name rules live in
ObjectStorage so every caller gets them.
"""

from rest_framework import serializers


class UploadUrlRequestSerializer(serializers.Serializer):
    file_name = serializers.CharField(trim_whitespace=False)
    file_type = serializers.CharField()
    unique_name = serializers.BooleanField(
        default=False,
        help_text='Replace the file name with <timestamp>-<random>.<ext>',
    )


class UploadTicketSerializer(serializers.Serializer):
    presigned_url = serializers.CharField()
    object_key = serializers.CharField()
    public_url = serializers.CharField()


class DeleteObjectRequestSerializer(serializers.Serializer):
    image_url = serializers.CharField()
    include_variants = serializers.BooleanField(
        default=True,
        help_text='Also delete the _mobile rendition of an image',
    )
