# Initial schema for the car model catalog

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CarModel',
            fields=[
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('id', models.CharField(help_text='Slug of the model name, used in public URLs', max_length=100, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('featured_image', models.CharField(help_text='Hero image URL', max_length=1000, verbose_name='Featured Image')),
                ('subheader', models.CharField(help_text='Text under the model name in the hero section', max_length=255, verbose_name='Subheader')),
                ('price', models.CharField(help_text='Display price, free text (e.g. "Rp 854 Juta")', max_length=100, verbose_name='Price')),
                ('sub_image', models.CharField(blank=True, max_length=1000, null=True, verbose_name='Secondary Image')),
                ('features', models.JSONField(default=list, help_text='List of feature strings, at least one', verbose_name='Features')),
                ('description', models.TextField(verbose_name='Description')),
                ('main_product_image', models.CharField(help_text='Image used in the navbar and model listings', max_length=1000, verbose_name='Main Product Image')),
                ('colors', models.JSONField(default=list, help_text='Colour options, at least one', verbose_name='Colors')),
                ('gallery', models.JSONField(blank=True, default=list, verbose_name='Gallery')),
                ('specifications', models.JSONField(blank=True, default=list, verbose_name='Specifications')),
                ('category', models.CharField(db_index=True, help_text='Category key, e.g. suv', max_length=50, verbose_name='Category')),
                ('category_display', models.CharField(help_text='Category label shown on the site, e.g. SUV', max_length=100, verbose_name='Category Display Name')),
                ('published', models.BooleanField(db_index=True, default=False, verbose_name='Published')),
            ],
            options={
                'verbose_name': 'Car Model',
                'verbose_name_plural': 'Car Models',
                'db_table': 'car_models',
                'ordering': ['name'],
            },
        ),
    ]
