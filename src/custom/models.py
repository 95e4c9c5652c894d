import logging
import uuid

from django.db import models
from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from . import managers

logger = logging.getLogger(__name__)


class CustomUser( AbstractBaseUser, PermissionsMixin ):
    """Mostly a copy of Django's AbstractUser code, but with uuid, email and
    phone as unique fields and without the username field.

    An account may be a placeholder: created automatically when someone
    shares with an email or phone number nobody has registered yet. The
    placeholder anchors companion edges and attendee grants, and is
    claimed (is_placeholder cleared) when that person registers.

    The UUID field allows us to have a unique, unchanging field for external references to users.
    """
    uuid = models.UUIDField(
        'UUID',
        default = uuid.uuid4,
        unique = True,
        null = False,
    )
    email = models.EmailField(
        _('email address'),
        unique = True,
        null = True,
        blank = True,
    )
    phone = models.CharField(
        _('phone number'),
        max_length = 32,
        unique = True,
        null = True,
        blank = True,
    )
    first_name = models.CharField(
        _('first name'),
        max_length = 150,
        blank = True
    )
    last_name = models.CharField(
        _('last name'),
        max_length = 150,
        blank = True
    )
    is_placeholder = models.BooleanField(
        _('placeholder'),
        default = False,
        help_text = _('Created by a sharing action; not yet claimed by registration.')
    )
    is_staff = models.BooleanField(
        _('staff status'),
        default = False,
        help_text = _('Designates whether the user can log into this admin site.')
    )
    is_active = models.BooleanField(
        _('active'),
        default = True,
        help_text = _('Designates whether this user should be treated as '
                      'active. Unselect this instead of deleting accounts.')
    )
    date_joined = models.DateTimeField(
        _('date joined'),
        default = timezone.now
    )

    objects = managers.CustomUserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = [ ]

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')

    def __str__(self):
        if self.email:
            return self.email
        if self.phone:
            return self.phone
        return self.uuid_str

    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_identifier_email( self.email )
        self.phone = self.__class__.objects.normalize_phone( self.phone )
        return

    @property
    def uuid_str(self):
        return str(self.uuid)

    def get_full_name(self):
        full_name = '%s %s' % (self.first_name, self.last_name)
        return full_name.strip()

    def get_short_name(self):
        return self.first_name

    def to_public_dict(self):
        """ Profile fields safe to show to other accounts. """
        return {
            'uuid': self.uuid_str,
            'email': self.email,
            'phone': self.phone,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'is_placeholder': self.is_placeholder,
        }
