import pytest
from apps.accounts.flags import EmailPreference, FlagSet, Role, SetupStep
from apps.accounts.models import User


class TestFlagSet:
    """Tests for the enum-backed FlagSet."""

    def test_add_is_idempotent(self):
        roles = FlagSet(Role)
        roles.add(Role.MENTOR)
        roles.add('mentor')

        assert len(roles) == 1
        assert Role.MENTOR in roles

    def test_remove_absent_flag_is_noop(self):
        roles = FlagSet(Role, ['mentor'])
        roles.remove(Role.SPECTATOR)

        assert roles.to_list() == ['mentor']

    def test_unknown_value_rejected_on_add(self):
        roles = FlagSet(Role)

        with pytest.raises(ValueError):
            roles.add('astronaut')

    def test_unknown_value_not_contained(self):
        roles = FlagSet(Role, ['mentor'])

        assert 'astronaut' not in roles

    def test_to_list_is_sorted(self):
        roles = FlagSet(Role, ['spectator', 'admin', 'mentor'])

        assert roles.to_list() == ['admin', 'mentor', 'spectator']

    def test_equality_with_plain_set(self):
        assert FlagSet(SetupStep, ['profile']) == {'profile'}
        assert FlagSet(SetupStep, ['profile']) != FlagSet(SetupStep, ['welcome'])


@pytest.mark.django_db
class TestFlagSetField:
    """Tests for storing FlagSets on the User model."""

    def test_new_user_defaults(self):
        user = User.objects.create_user(email='flags@example.com', password='TestPass123!')

        assert isinstance(user.roles, FlagSet)
        assert len(user.roles) == 0
        assert len(user.setup) == 0
        assert set(user.email_on.to_list()) == {p.value for p in EmailPreference}

    def test_roundtrip_through_database(self):
        user = User.objects.create_user(email='flags@example.com', password='TestPass123!')
        user.roles.add(Role.INVESTOR)
        user.setup.add(SetupStep.ACCOUNT_TYPE)
        user.save()

        reloaded = User.objects.get(pk=user.pk)
        assert Role.INVESTOR in reloaded.roles
        assert SetupStep.ACCOUNT_TYPE in reloaded.setup
        assert reloaded.roles.enum is Role

    def test_assigning_a_list_gives_a_flagset(self):
        user = User(email='flags@example.com')
        user.roles = ['mentor', 'spectator']

        assert isinstance(user.roles, FlagSet)
        assert Role.SPECTATOR in user.roles
