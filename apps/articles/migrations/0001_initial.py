# Initial schema for articles

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Article',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('title', models.CharField(help_text='Article headline', max_length=255, verbose_name='Title')),
                ('slug', models.CharField(blank=True, help_text='URL identifier, unique across all articles', max_length=255, unique=True, verbose_name='Slug')),
                ('content', models.TextField(help_text='Sanitized article HTML', verbose_name='Content')),
                ('excerpt', models.TextField(help_text='Short summary shown in listings', verbose_name='Excerpt')),
                ('category', models.CharField(db_index=True, help_text='e.g. News or Promo', max_length=50, verbose_name='Category')),
                ('featured_image_url', models.URLField(blank=True, max_length=1000, null=True, verbose_name='Featured Image URL')),
                ('featured_image_alt', models.CharField(blank=True, max_length=255, null=True, verbose_name='Featured Image Alt Text')),
                ('youtube_url', models.CharField(blank=True, max_length=500, null=True, verbose_name='YouTube URL')),
                ('published', models.BooleanField(db_index=True, default=False, verbose_name='Published')),
                ('published_at', models.DateTimeField(blank=True, help_text='Set when published, cleared when unpublished', null=True, verbose_name='Published At')),
                ('meta_description', models.CharField(blank=True, max_length=500, null=True, verbose_name='Meta Description')),
            ],
            options={
                'verbose_name': 'Article',
                'verbose_name_plural': 'Articles',
                'db_table': 'articles',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['published', '-created_at'], name='articles_pub_created_idx')],
            },
        ),
    ]
