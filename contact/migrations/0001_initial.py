import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ('name', models.CharField(max_length=100)),
                ('company', models.CharField(blank=True, default='', max_length=200)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(blank=True, default='', max_length=50)),
                ('subject', models.CharField(choices=[('network-security', 'Netwerk & Security'), ('website-design', 'Website & Logo Ontwerp'), ('iot-ai', 'IoT & AI Oplossingen'), ('computer-help', 'All-round Computerhulp'), ('quote-request', 'Offerte aanvragen'), ('support', 'Ondersteuning'), ('other', 'Anders')], max_length=32)),
                ('urgency', models.CharField(choices=[('low', 'Laag'), ('normal', 'Normaal'), ('high', 'Hoog'), ('urgent', 'Spoed')], default='normal', max_length=16)),
                ('message', models.TextField()),
                ('privacy_consent', models.BooleanField()),
                ('newsletter_opt_in', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': 'Contact Submission',
                'verbose_name_plural': 'Contact Submissions',
                'db_table': 'contact_submissions',
                'ordering': ['id'],
            },
        ),
    ]
