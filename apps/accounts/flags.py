"""
Enum-backed flag sets for user roles, setup progress and email preferences.

A FlagSet behaves like a small set restricted to the members of one
TextChoices enum. FlagSetField stores it as a sorted JSON list so the
column stays readable in the database and in the admin.
"""

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.db.models.query_utils import DeferredAttribute


class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    ENTREPRENEUR = 'entrepreneur', 'Entrepreneur'
    MENTOR = 'mentor', 'Mentor'
    INVESTOR = 'investor', 'Investor'
    SPECTATOR = 'spectator', 'Spectator'


# Account types a user may pick for themselves
SELECTABLE_ROLES = [
    Role.ENTREPRENEUR,
    Role.MENTOR,
    Role.INVESTOR,
    Role.SPECTATOR,
]


class SetupStep(models.TextChoices):
    ACCOUNT_TYPE = 'account_type', 'Account type'
    PROFILE = 'profile', 'Profile'
    WELCOME = 'welcome', 'Welcome'


class EmailPreference(models.TextChoices):
    DOCHECKIN = 'docheckin', 'Checkin reminders'
    COMMENT = 'comment', 'Comments on checkins'
    MESSAGE = 'message', 'Direct messages'
    INVITE = 'invite', 'Invites'


class FlagSet:
    """Set of members of a single enum."""

    def __init__(self, enum, values=()):
        self.enum = enum
        self._values = {enum(value) for value in values}

    def add(self, flag):
        self._values.add(self.enum(flag))

    def remove(self, flag):
        """Remove a flag; removing an absent flag is a no-op."""
        try:
            self._values.discard(self.enum(flag))
        except ValueError:
            pass

    def __contains__(self, flag):
        try:
            return self.enum(flag) in self._values
        except ValueError:
            return False

    def __iter__(self):
        return iter(sorted(self._values))

    def __len__(self):
        return len(self._values)

    def __bool__(self):
        return bool(self._values)

    def __eq__(self, other):
        if isinstance(other, FlagSet):
            return self.enum is other.enum and self._values == other._values
        if isinstance(other, (set, frozenset)):
            return self._values == {self.enum(value) for value in other}
        return NotImplemented

    def issuperset(self, flags):
        return all(flag in self for flag in flags)

    def to_list(self):
        return [flag.value for flag in sorted(self._values)]

    def __repr__(self):
        return f"FlagSet({self.enum.__name__}, {self.to_list()})"


class FlagSetEncoder(DjangoJSONEncoder):

    def default(self, o):
        if isinstance(o, FlagSet):
            return o.to_list()
        return super().default(o)


class FlagSetDescriptor(DeferredAttribute):
    """Normalise every assignment to a FlagSet bound to the field's enum."""

    def __set__(self, instance, value):
        instance.__dict__[self.field.attname] = self.field.to_flagset(value)


class FlagSetField(models.JSONField):
    """JSON list column exposed on the model as a FlagSet."""

    descriptor_class = FlagSetDescriptor

    def __init__(self, *args, enum=None, **kwargs):
        self.enum = enum
        kwargs.setdefault('default', list)
        kwargs.setdefault('blank', True)
        kwargs.setdefault('encoder', FlagSetEncoder)
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs['enum'] = self.enum
        kwargs.pop('encoder', None)
        return name, path, args, kwargs

    def to_flagset(self, value):
        if value is None:
            value = []
        if isinstance(value, FlagSet):
            return FlagSet(self.enum, value.to_list())
        return FlagSet(self.enum, value)

    def get_prep_value(self, value):
        if isinstance(value, FlagSet):
            value = value.to_list()
        return super().get_prep_value(value)

    def value_from_object(self, obj):
        value = super().value_from_object(obj)
        if isinstance(value, FlagSet):
            return value.to_list()
        return value
