from rest_framework import serializers

from apps.startups.models import Invite
from .flags import EmailPreference, SELECTABLE_ROLES
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Profile as shown on the account pages."""

    roles = serializers.SerializerMethodField()
    setup = serializers.SerializerMethodField()
    email_on = serializers.SerializerMethodField()
    startup = serializers.PrimaryKeyRelatedField(read_only=True)
    setup_complete = serializers.BooleanField(source='is_setup_complete', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'location',
            'one_liner',
            'bio',
            'linkedin_url',
            'twitter',
            'roles',
            'setup',
            'setup_complete',
            'email_on',
            'startup',
            'created_at',
        ]
        read_only_fields = fields

    def get_roles(self, obj):
        return obj.roles.to_list()

    def get_setup(self, obj):
        return obj.setup.to_list()

    def get_email_on(self, obj):
        return obj.email_on.to_list()


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for checkins, comments, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'display_name', 'created_at']
        read_only_fields = fields


class UserProfileUpdateSerializer(serializers.ModelSerializer):
    """Editable profile fields."""

    email_on = serializers.ListField(
        child=serializers.ChoiceField(choices=EmailPreference.choices),
        required=False,
        allow_empty=True,
    )

    class Meta:
        model = User
        fields = [
            'display_name',
            'location',
            'one_liner',
            'bio',
            'linkedin_url',
            'twitter',
            'email_on',
        ]

    def validate_twitter(self, value):
        """Store the bare handle."""
        value = value.strip().lstrip('@')
        if value and not value.replace('_', '').isalnum():
            raise serializers.ValidationError('Twitter handle may only contain letters, numbers and underscores')
        return value

    def to_representation(self, instance):
        return UserSerializer(instance, context=self.context).data


class AccountTypeSerializer(serializers.Serializer):
    """Input for the account type form."""

    reset = serializers.BooleanField(required=False, default=False)
    roles = serializers.ChoiceField(
        choices=[(role.value, role.label) for role in SELECTABLE_ROLES],
        required=False,
        allow_blank=True,
    )


class InviteSerializer(serializers.ModelSerializer):
    startup_name = serializers.CharField(source='startup.name', read_only=True)

    class Meta:
        model = Invite
        fields = ['id', 'startup', 'startup_name', 'invite_type', 'expires_at', 'created_at']
        read_only_fields = fields


class ProfileSerializer(serializers.Serializer):
    """Profile page: the user plus invite information."""

    user = UserSerializer()
    current_invite = InviteSerializer(allow_null=True)
    can_invite_as_mentor = serializers.BooleanField()


class ChatAccountSerializer(serializers.ModelSerializer):

    class Meta:
        model = User
        fields = ['hipchat_username', 'hipchat_password']
        read_only_fields = fields
