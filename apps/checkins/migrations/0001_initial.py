# Generated manually for checkins app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('startups', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Checkin',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('start_focus', models.TextField(blank=True)),
                ('start_why', models.TextField(blank=True)),
                ('start_video_url', models.URLField(blank=True, max_length=255)),
                ('start_comments', models.TextField(blank=True)),
                ('end_video_url', models.URLField(blank=True, max_length=255)),
                ('end_comments', models.TextField(blank=True)),
                ('comment_count', models.PositiveIntegerField(default=0)),
                ('submitted_at', models.DateTimeField(blank=True, null=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('startup', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='checkins', to='startups.startup')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='checkins', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'checkins',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['startup', 'created_at'], name='checkins_startup_8b1d2e_idx'),
                    models.Index(fields=['completed_at'], name='checkins_complet_4f9a1c_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CheckinComment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('checkin', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='checkins.checkin')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='checkin_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'checkin_comments',
                'ordering': ['created_at'],
            },
        ),
    ]
