"""
Management command that initialises the site page records.

Creates the homepage, about us, contact info and site settings rows
with their default content. Existing rows are left untouched.

Usage:
    python manage.py seed_site
"""

from django.core.management.base import BaseCommand

from apps.pages.services import seed_site_pages


class Command(BaseCommand):
    help = 'Initialise homepage, about us, contact info and site settings'

    def handle(self, *args, **options):
        self.stdout.write(self.style.NOTICE('Seeding site pages'))

        for name, created in seed_site_pages().items():
            if created:
                self.stdout.write(self.style.SUCCESS(f"  {name}: created"))
            else:
                self.stdout.write(f"  {name}: already present")

        self.stdout.write(self.style.SUCCESS('Site pages ready'))
