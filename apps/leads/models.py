"""
Contact lead models.
"""

from django.db import models
from django.utils import timezone


class ContactSubmission(models.Model):
    """
    A contact form submission from the public site.

    Status tracks the sales follow-up; new submissions start as ``new``.
    """

    STATUS_NEW = 'new'
    STATUS_CONTACTED = 'contacted'
    STATUS_FOLLOW_UP = 'follow_up'
    STATUS_QUALIFIED = 'qualified'
    STATUS_CLOSED_WON = 'closed_won'
    STATUS_CLOSED_LOST = 'closed_lost'

    STATUS_CHOICES = [
        (STATUS_NEW, 'New'),
        (STATUS_CONTACTED, 'Contacted'),
        (STATUS_FOLLOW_UP, 'Follow Up'),
        (STATUS_QUALIFIED, 'Qualified'),
        (STATUS_CLOSED_WON, 'Closed (Won)'),
        (STATUS_CLOSED_LOST, 'Closed (Lost)'),
    ]

    full_name = models.CharField(
        max_length=255,
        verbose_name='Full Name'
    )

    email = models.EmailField(
        max_length=255,
        verbose_name='Email'
    )

    phone_number = models.CharField(
        max_length=50,
        verbose_name='Phone Number'
    )

    location = models.CharField(
        max_length=255,
        verbose_name='Location',
        help_text='Dealer location the lead picked'
    )

    car_model_interest = models.CharField(
        max_length=255,
        verbose_name='Car Model Interest'
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_NEW,
        db_index=True,
        verbose_name='Status'
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        verbose_name='Submitted At'
    )

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['created_at']
        verbose_name = 'Contact Submission'
        verbose_name_plural = 'Contact Submissions'

    def __str__(self):
        return f"{self.full_name} <{self.email}> ({self.status})"

    @classmethod
    def valid_statuses(cls):
        return [value for value, _ in cls.STATUS_CHOICES]
