import uuid

from django.conf import settings
from django.db import models

from ts.apps.common.model_fields import LabeledEnumField

from .enums import ResourceKind, TripPurpose
from . import managers


class ShareableModel( models.Model ):
    """
    Abstract base for anything attendee grants can be attached to.

    Provides the fields the sharing core reads:
    - created_by: immutable creator; the only account allowed to delete
    - uuid: external identifier
    - created_datetime / modified_datetime

    Subclasses set RESOURCE_KIND. Grants are keyed by (RESOURCE_KIND, pk).
    """
    RESOURCE_KIND : ResourceKind = None

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = '%(class)s_created',
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        abstract = True

    @property
    def resource_kind(self) -> ResourceKind:
        return self.RESOURCE_KIND

    @property
    def resource_id(self) -> int:
        return self.pk

    @property
    def creator_id(self) -> int:
        return self.created_by_id

    @property
    def parent_trip_id(self) -> int:
        return None

    @property
    def has_parent_trip(self) -> bool:
        return self.parent_trip_id is not None


class Trip( ShareableModel ):
    """
    Core organizing entity for travel items. Access is shared through
    attendee grants on the trip and through the creator's companions.
    """
    RESOURCE_KIND = ResourceKind.TRIP

    objects = managers.TripManager()

    name = models.CharField(
        max_length = 200,
    )
    description = models.TextField(
        blank = True,
    )
    departure_date = models.DateField(
        null = True,
        blank = True,
    )
    return_date = models.DateField(
        null = True,
        blank = True,
    )
    purpose = LabeledEnumField(
        TripPurpose,
        'Purpose',
    )
    is_confirmed = models.BooleanField(
        default = False,
    )

    class Meta:
        verbose_name = 'Trip'
        verbose_name_plural = 'Trips'
        ordering = [ '-created_datetime' ]

    def __str__(self):
        return f'{self.name} [{self.pk}]'

    def __repr__(self):
        return f'{self.name} [{self.pk}]'
