# Initial schema for site pages

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='HomepageConfig',
            fields=[
                ('id', models.CharField(default='main', editable=False, max_length=32, primary_key=True, serialize=False, verbose_name='ID')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('hero_desktop_image_url', models.URLField(max_length=1000, verbose_name='Hero Desktop Image URL')),
                ('hero_mobile_image_url', models.URLField(max_length=1000, verbose_name='Hero Mobile Image URL')),
                ('hero_title', models.CharField(max_length=255, verbose_name='Hero Title')),
                ('hero_subtitle', models.TextField(blank=True, null=True, verbose_name='Hero Subtitle')),
                ('hero_primary_button_text', models.CharField(blank=True, max_length=100, null=True)),
                ('hero_primary_button_link', models.CharField(blank=True, max_length=500, null=True)),
                ('hero_secondary_button_text', models.CharField(blank=True, max_length=100, null=True)),
                ('hero_secondary_button_link', models.CharField(blank=True, max_length=500, null=True)),
                ('meta_title', models.CharField(blank=True, max_length=255, null=True, verbose_name='Meta Title')),
                ('meta_description', models.CharField(blank=True, max_length=500, null=True, verbose_name='Meta Description')),
            ],
            options={
                'verbose_name': 'Homepage Configuration',
                'verbose_name_plural': 'Homepage Configuration',
                'db_table': 'homepage_config',
            },
        ),
        migrations.CreateModel(
            name='HomepageSection',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('order', models.PositiveIntegerField(help_text='Position on the page, starting at 0', verbose_name='Order')),
                ('section_type', models.CharField(choices=[('default', 'Model Showcase'), ('feature_cards_grid', 'Feature Cards Grid'), ('banner', 'Banner')], default='default', max_length=30, verbose_name='Section Type')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('subtitle', models.CharField(blank=True, max_length=500, null=True, verbose_name='Subtitle')),
                ('type_specific_data', models.JSONField(blank=True, default=dict, verbose_name='Type-specific Data')),
                ('config', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sections', to='pages.homepageconfig', verbose_name='Homepage')),
            ],
            options={
                'verbose_name': 'Homepage Section',
                'verbose_name_plural': 'Homepage Sections',
                'db_table': 'homepage_sections',
                'ordering': ['order'],
            },
        ),
        migrations.CreateModel(
            name='AboutUs',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=100, verbose_name='Title')),
                ('content', models.TextField(verbose_name='Content')),
                ('mission', models.TextField(blank=True, null=True, verbose_name='Mission')),
                ('vision', models.TextField(blank=True, null=True, verbose_name='Vision')),
                ('image_url', models.URLField(blank=True, max_length=1000, null=True, verbose_name='Image URL')),
                ('image_alt', models.CharField(blank=True, max_length=200, null=True, verbose_name='Image Alt Text')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'About Us',
                'verbose_name_plural': 'About Us',
                'db_table': 'about_us',
            },
        ),
        migrations.CreateModel(
            name='ContactInfo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('phone', models.CharField(max_length=50, verbose_name='Phone')),
                ('email', models.EmailField(max_length=255, verbose_name='Email')),
                ('address', models.CharField(max_length=500, verbose_name='Address')),
                ('facebook', models.CharField(max_length=500, verbose_name='Facebook URL')),
                ('instagram', models.CharField(max_length=500, verbose_name='Instagram URL')),
                ('x', models.CharField(max_length=500, verbose_name='X/Twitter URL')),
                ('youtube', models.CharField(max_length=500, verbose_name='YouTube URL')),
                ('whatsapp_url', models.URLField(blank=True, default='', max_length=1000, verbose_name='WhatsApp URL')),
                ('meta_title', models.CharField(blank=True, max_length=255, null=True)),
                ('meta_description', models.CharField(blank=True, max_length=500, null=True)),
                ('meta_keywords', models.CharField(blank=True, max_length=500, null=True)),
                ('meta_image', models.URLField(blank=True, max_length=1000, null=True)),
                ('hero_desktop_image_url', models.URLField(blank=True, max_length=1000, null=True)),
                ('hero_mobile_image_url', models.URLField(blank=True, max_length=1000, null=True)),
                ('hero_title', models.CharField(blank=True, max_length=255, null=True)),
                ('hero_tagline', models.CharField(blank=True, max_length=255, null=True)),
                ('hero_subtitle', models.CharField(blank=True, max_length=500, null=True)),
                ('hero_highlight_color', models.CharField(blank=True, max_length=20, null=True)),
                ('form_title', models.CharField(blank=True, max_length=255, null=True)),
                ('form_description', models.CharField(blank=True, max_length=500, null=True)),
                ('gmaps_place_query', models.CharField(blank=True, max_length=500, null=True)),
                ('location_options', models.JSONField(blank=True, default=list, help_text='Choices offered in the contact form location field', verbose_name='Location Options')),
                ('logo_url', models.URLField(blank=True, max_length=1000, null=True)),
                ('logo_white_url', models.URLField(blank=True, max_length=1000, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'Contact Information',
                'verbose_name_plural': 'Contact Information',
                'db_table': 'contact_info',
            },
        ),
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.CharField(default='main', editable=False, max_length=32, primary_key=True, serialize=False, verbose_name='ID')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('brand_name', models.CharField(blank=True, max_length=255, null=True, verbose_name='Brand Name')),
                ('google_analytics_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Google Analytics ID')),
                ('google_tag_manager_id', models.CharField(blank=True, max_length=50, null=True, verbose_name='Google Tag Manager ID')),
            ],
            options={
                'verbose_name': 'Site Settings',
                'verbose_name_plural': 'Site Settings',
                'db_table': 'site_settings',
            },
        ),
    ]
