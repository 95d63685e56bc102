"""
S3-compatible object storage client.

Wraps a boto3 S3 client pointed at Cloudflare R2. The client is built
explicitly (see ``get_object_storage``) and handed to whatever needs it,
so tests can pass a MagicMock in its place.

Usage:
    from apps.storage.client import get_object_storage

    storage = get_object_storage()
    ticket = storage.request_upload_url('hero.webp', 'image/webp')
    # browser PUTs the file to ticket.presigned_url
    storage.delete_object(ticket.public_url)
"""

import logging
import re
import secrets
import time
from dataclasses import dataclass, field, asdict
from typing import List, Optional
from urllib.parse import urlparse

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from apps.core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)


MAX_FILE_NAME_LENGTH = 255
FILE_NAME_PATTERN = re.compile(r'[a-zA-Z0-9\-_./ ()]+')
KEY_PREFIXES = ('images/', 'files/')

# Direct bucket endpoint, e.g. https://<account>.r2.cloudflarestorage.com/images/x.png
ENDPOINT_URL_PATTERN = re.compile(r'^https://(?:[\w-]+\.)+r2\.cloudflarestorage\.com/([^?#]+)')
ENDPOINT_IMAGE_PATTERN = re.compile(r'^https://(?:[\w-]+\.)+r2\.cloudflarestorage\.com/images/([\w.-]+)')

MOBILE_SUFFIX = '_mobile'


@dataclass(frozen=True)
class UploadTicket:
    """Presigned PUT target plus the URL the object will be served from."""
    presigned_url: str
    object_key: str
    public_url: str

    def to_dict(self):
        return asdict(self)


@dataclass
class DeletionResult:
    """Outcome of deleting an image and its derived variants."""
    deleted: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed


def generate_unique_file_name(file_name: str) -> str:
    """Return ``<ms timestamp>-<16 hex chars>.<ext>`` for an uploaded file."""
    extension = file_name.rsplit('.', 1)[-1]
    return f"{int(time.time() * 1000)}-{secrets.token_hex(8)}.{extension}"


def mobile_variant_key(object_key: str) -> Optional[str]:
    """
    Key of the mobile rendition stored next to a desktop image.

    ``images/hero.webp`` -> ``images/hero_mobile.webp``. Returns None when
    the key has no folder or extension, or already is a mobile key.
    """
    dot = object_key.rfind('.')
    if dot == -1 or '/' not in object_key:
        return None
    base, extension = object_key[:dot], object_key[dot:]
    if base.endswith(MOBILE_SUFFIX):
        return None
    return f"{base}{MOBILE_SUFFIX}{extension}"


def _is_missing_key_error(exc: ClientError) -> bool:
    code = exc.response.get('Error', {}).get('Code')
    return code in ('NoSuchKey', '404')


class ObjectStorage:
    """
    Presigned uploads and deletions for one bucket.

    Args:
        client: boto3 S3 client (or anything with the same methods).
        bucket: Bucket name.
        public_url: Base URL objects are publicly served from.
        expires_in: Lifetime of presigned upload URLs, in seconds.
    """

    def __init__(self, client, bucket: str, public_url: str, expires_in: int = 3600):
        self.client = client
        self.bucket = bucket
        self.public_url = public_url.rstrip('/')
        self.expires_in = expires_in

    # -------------------------------------------------------------------------
    # URL mapping
    # -------------------------------------------------------------------------

    def public_url_for(self, object_key: str) -> str:
        return f"{self.public_url}/{object_key}"

    def extract_object_key(self, url) -> Optional[str]:
        """
        Object key for a URL we serve, or None.

        Accepts URLs under the public domain and raw bucket endpoint URLs
        (the latter only inside ``images/`` or ``files/``).
        """
        if not url or not isinstance(url, str):
            return None

        if url.startswith(f"{self.public_url}/"):
            path = urlparse(url).path
            if path.startswith('/'):
                path = path[1:]
            return path or None

        match = ENDPOINT_URL_PATTERN.match(url)
        if match and match.group(1).startswith(KEY_PREFIXES):
            return match.group(1)

        logger.warning("Could not extract an object key from URL: %s", url)
        return None

    def ensure_public_domain(self, url):
        """Rewrite raw-endpoint image URLs onto the public domain."""
        if not url or url.startswith(self.public_url):
            return url

        match = ENDPOINT_IMAGE_PATTERN.match(url)
        if match:
            return self.public_url_for(f"images/{match.group(1)}")
        return url

    # -------------------------------------------------------------------------
    # Uploads
    # -------------------------------------------------------------------------

    @staticmethod
    def validate_file_name(file_name, file_type):
        if not file_name or not file_type:
            raise ValidationError("File name and type are required")
        if len(file_name) > MAX_FILE_NAME_LENGTH or not FILE_NAME_PATTERN.fullmatch(file_name):
            raise ValidationError("Invalid file name format or length.", field='file_name')

    def request_upload_url(self, file_name: str, file_type: str) -> UploadTicket:
        """
        Issue a presigned PUT URL for a browser upload.

        Images go under ``images/``, everything else under ``files/``.
        The client-supplied file name is used as-is for the key.
        """
        self.validate_file_name(file_name, file_type)

        folder = 'images' if file_type.startswith('image/') else 'files'
        object_key = f"{folder}/{file_name[1:] if file_name.startswith('/') else file_name}"

        logger.info("Generating presigned URL for key %s (%s)", object_key, file_type)

        try:
            presigned_url = self.client.generate_presigned_url(
                'put_object',
                Params={
                    'Bucket': self.bucket,
                    'Key': object_key,
                    'ContentType': file_type,
                },
                ExpiresIn=self.expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Presigned URL generation failed for %s: %s", object_key, e)
            raise ExternalServiceError(f"Presigned URL Error: {e}")

        return UploadTicket(
            presigned_url=presigned_url,
            object_key=object_key,
            public_url=self.public_url_for(object_key),
        )

    # -------------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------------

    def _require_key(self, public_url) -> str:
        if not public_url:
            raise ValidationError("Image URL is required", field='image_url')
        object_key = self.extract_object_key(public_url)
        if not object_key:
            raise ValidationError(
                f"Invalid image URL format, cannot determine object key: {public_url}",
                field='image_url',
            )
        return object_key

    def delete_object(self, public_url: str) -> bool:
        """Delete the single object behind ``public_url``."""
        object_key = self._require_key(public_url)
        try:
            self.client.delete_object(Bucket=self.bucket, Key=object_key)
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to delete object %s: %s", object_key, e)
            raise ExternalServiceError(f"Failed to delete object from storage: {e}")

        logger.info("Deleted object %s", object_key)
        return True

    def delete_image(self, public_url: str) -> DeletionResult:
        """
        Delete an image and its mobile rendition.

        A variant that no longer exists is not a failure. Any other error
        is collected, and raised once every key has been attempted.
        """
        object_key = self._require_key(public_url)
        keys = [object_key]
        mobile_key = mobile_variant_key(object_key)
        if mobile_key:
            keys.append(mobile_key)

        result = DeletionResult()
        for key in keys:
            try:
                self.client.delete_object(Bucket=self.bucket, Key=key)
                result.deleted.append(key)
            except ClientError as e:
                if _is_missing_key_error(e):
                    logger.info("Object already gone: %s", key)
                    result.missing.append(key)
                else:
                    logger.error("Failed to delete object %s: %s", key, e)
                    result.failed.append(key)
            except BotoCoreError as e:
                logger.error("Failed to delete object %s: %s", key, e)
                result.failed.append(key)

        if result.failed:
            raise ExternalServiceError(
                f"Failed to delete one or more image variants: {', '.join(result.failed)}",
                details={'deleted': result.deleted, 'failed': result.failed},
            )
        return result


def build_s3_client():
    """boto3 S3 client for the configured R2 account."""
    return boto3.client(
        's3',
        endpoint_url=settings.STORAGE_ENDPOINT_URL or None,
        aws_access_key_id=settings.STORAGE_ACCESS_KEY_ID or None,
        aws_secret_access_key=settings.STORAGE_SECRET_ACCESS_KEY or None,
        region_name=settings.STORAGE_REGION_NAME,
        config=Config(signature_version='s3v4'),
    )


def get_object_storage(client=None) -> ObjectStorage:
    """Construct an ObjectStorage from Django settings."""
    return ObjectStorage(
        client=client if client is not None else build_s3_client(),
        bucket=settings.STORAGE_BUCKET_NAME,
        public_url=settings.STORAGE_PUBLIC_URL,
        expires_in=settings.STORAGE_UPLOAD_URL_EXPIRES,
    )
