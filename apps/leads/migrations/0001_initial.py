# Initial schema for contact leads

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=255, verbose_name='Full Name')),
                ('email', models.EmailField(max_length=255, verbose_name='Email')),
                ('phone_number', models.CharField(max_length=50, verbose_name='Phone Number')),
                ('location', models.CharField(help_text='Dealer location the lead picked', max_length=255, verbose_name='Location')),
                ('car_model_interest', models.CharField(max_length=255, verbose_name='Car Model Interest')),
                ('status', models.CharField(choices=[('new', 'New'), ('contacted', 'Contacted'), ('follow_up', 'Follow Up'), ('qualified', 'Qualified'), ('closed_won', 'Closed (Won)'), ('closed_lost', 'Closed (Lost)')], db_index=True, default='new', max_length=20, verbose_name='Status')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False, verbose_name='Submitted At')),
            ],
            options={
                'verbose_name': 'Contact Submission',
                'verbose_name_plural': 'Contact Submissions',
                'db_table': 'contact_submissions',
                'ordering': ['created_at'],
            },
        ),
    ]
