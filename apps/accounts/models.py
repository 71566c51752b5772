from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid

from .flags import EmailPreference, FlagSetField, Role, SetupStep


def default_email_preferences():
    return [preference.value for preference in EmailPreference]


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        user = self.create_user(email, password, **extra_fields)
        user.roles.add(Role.ADMIN)
        user.save(update_fields=['roles'])
        return user


class User(AbstractBaseUser, PermissionsMixin):
    """Community member: entrepreneur, mentor, investor or spectator."""

    # Fields that count towards profile completeness, in display order
    PROFILE_ELEMENTS = [
        'display_name',
        'location',
        'one_liner',
        'bio',
        'linkedin_url',
        'twitter',
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    display_name = models.CharField(max_length=100, blank=True)

    # Profile
    location = models.CharField(max_length=100, blank=True)
    one_liner = models.CharField(max_length=140, blank=True)
    bio = models.TextField(blank=True)
    linkedin_url = models.URLField(max_length=255, blank=True)
    twitter = models.CharField(max_length=50, blank=True)

    # Roles, onboarding progress and email preferences
    roles = FlagSetField(enum=Role)
    setup = FlagSetField(enum=SetupStep)
    email_on = FlagSetField(enum=EmailPreference, default=default_email_preferences)

    startup = models.ForeignKey(
        'startups.Startup',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='team_members'
    )

    # Chat account
    hipchat_username = models.CharField(max_length=100, blank=True)
    hipchat_password = models.CharField(max_length=100, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['email'], name='users_email_0ea73c_idx'),
            models.Index(fields=['created_at'], name='users_created_6541e9_idx'),
        ]

    def __str__(self):
        return self.email

    def get_display_name(self):
        """Return display name or email prefix."""
        return self.display_name or self.email.split('@')[0]

    @property
    def is_admin(self):
        return self.is_staff or Role.ADMIN in self.roles

    def email_for(self, preference):
        """True if the user opted in to emails of this kind."""
        return preference in self.email_on

    @property
    def has_chat_account(self):
        return bool(self.hipchat_username and self.hipchat_password)

    @property
    def is_setup_complete(self):
        return self.setup.issuperset(SetupStep)

    def setup_complete(self):
        """Mark every onboarding step as done."""
        for step in SetupStep:
            self.setup.add(step)
        self.save(update_fields=['setup'])

    def profile_elements(self):
        """Ordered mapping of profile field name to whether it is filled in."""
        return {
            name: bool(str(getattr(self, name) or '').strip())
            for name in self.PROFILE_ELEMENTS
        }

    def profile_completeness(self):
        """Fraction of profile elements filled in, between 0 and 1."""
        elements = self.profile_elements()
        return sum(elements.values()) / len(elements)
