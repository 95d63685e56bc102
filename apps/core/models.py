"""
Core models for the Showroom CMS.
Base classes and shared functionality.
"""

from django.conf import settings
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils import timezone


class TimestampedModel(models.Model):
    """
    Abstract base model with creation and modification timestamps.
    """

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        verbose_name='Created At',
        help_text='Timestamp when record was created'
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated At',
        help_text='Timestamp when record was last updated'
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.__class__.__name__} ({self.pk})"


class SingletonModel(models.Model):
    """
    Abstract base for configuration tables holding exactly one row.

    The row is keyed by ``SINGLETON_ID``; ``load()`` fetches it and
    ``defaults()`` supplies the values used to initialise it.
    """

    SINGLETON_ID = 'main'

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default='main',
        editable=False,
        verbose_name='ID',
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated At',
    )

    class Meta:
        abstract = True

    @classmethod
    def defaults(cls):
        return {}

    @classmethod
    def load(cls):
        """Return the singleton row, or None if it has not been initialised."""
        return cls.objects.filter(pk=cls.SINGLETON_ID).first()

    @classmethod
    def load_or_initialize(cls):
        """Return the singleton row, creating it from ``defaults()`` if missing."""
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_ID, defaults=cls.defaults())
        return obj


class EditorProfile(TimestampedModel):
    """
    Extended profile for staff using the admin dashboard.
    Linked 1:1 with Django User model.
    """

    ROLE_CHOICES = [
        ('admin', 'Administrator'),
        ('editor', 'Editor'),
        ('viewer', 'Viewer'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='editor_profile',
        verbose_name='User',
        help_text='The associated Django user account'
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default='editor',
        db_index=True,
        verbose_name='Role',
        help_text='User role determining permissions'
    )

    last_active_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Last Active',
        help_text='When user was last active in the dashboard'
    )

    class Meta:
        db_table = 'editor_profiles'
        verbose_name = 'Editor Profile'
        verbose_name_plural = 'Editor Profiles'

    def __str__(self):
        return f"{self.user.username} ({self.role})"

    @property
    def is_admin(self):
        return self.role == 'admin'

    @property
    def can_edit(self):
        """Check if user can edit content."""
        return self.role in ('admin', 'editor')


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_editor_profile(sender, instance, created, **kwargs):
    """Auto-create EditorProfile when a new User is created."""
    if created:
        EditorProfile.objects.create(user=instance)
