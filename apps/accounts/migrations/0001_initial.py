# Generated manually for accounts app

import uuid
from django.db import migrations, models
import django.db.models.deletion

import apps.accounts.flags
import apps.accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
        ('startups', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('email', models.EmailField(db_index=True, max_length=255, unique=True)),
                ('display_name', models.CharField(blank=True, max_length=100)),
                ('location', models.CharField(blank=True, max_length=100)),
                ('one_liner', models.CharField(blank=True, max_length=140)),
                ('bio', models.TextField(blank=True)),
                ('linkedin_url', models.URLField(blank=True, max_length=255)),
                ('twitter', models.CharField(blank=True, max_length=50)),
                ('roles', apps.accounts.flags.FlagSetField(blank=True, default=list, enum=apps.accounts.flags.Role)),
                ('setup', apps.accounts.flags.FlagSetField(blank=True, default=list, enum=apps.accounts.flags.SetupStep)),
                ('email_on', apps.accounts.flags.FlagSetField(blank=True, default=apps.accounts.models.default_email_preferences, enum=apps.accounts.flags.EmailPreference)),
                ('hipchat_username', models.CharField(blank=True, max_length=100)),
                ('hipchat_password', models.CharField(blank=True, max_length=100)),
                ('is_active', models.BooleanField(default=True)),
                ('is_staff', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('last_login', models.DateTimeField(blank=True, null=True)),
                ('startup', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='team_members', to='startups.startup')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'users',
                'indexes': [
                    models.Index(fields=['email'], name='users_email_0ea73c_idx'),
                    models.Index(fields=['created_at'], name='users_created_6541e9_idx'),
                ],
            },
            managers=[
                ('objects', apps.accounts.models.UserManager()),
            ],
        ),
    ]
