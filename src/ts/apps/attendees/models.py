from django.conf import settings
from django.db import models

from ts.apps.common.model_fields import LabeledEnumField
from ts.apps.trips.enums import ResourceKind

from .enums import AttendeePermissionLevel
from . import managers


class Attendee( models.Model ):
    """
    A local grant of view or manage access for one account on one trip or
    item. The resource is referenced polymorphically by (resource_kind,
    resource_id); grants are removed by a post_delete receiver when the
    resource goes away.
    """
    objects = managers.AttendeeManager()

    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'attendee_grants',
    )
    resource_kind = LabeledEnumField(
        ResourceKind,
        'Resource Kind',
        use_safe_conversion = False,
    )
    resource_id = models.PositiveBigIntegerField()
    level = LabeledEnumField(
        AttendeePermissionLevel,
        'Permission Level',
        use_safe_conversion = False,
    )
    granted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        blank = True,
        related_name = 'attendee_grants_given',
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Attendee'
        verbose_name_plural = 'Attendees'
        unique_together = [ ( 'account', 'resource_kind', 'resource_id' ) ]
        indexes = [
            models.Index( fields = [ 'resource_kind', 'resource_id' ], name = 'attendee_resource_idx' ),
        ]
        ordering = [ 'created_datetime', 'id' ]

    def __str__(self):
        return f'{self.account} - {self.resource_kind}:{self.resource_id} ({self.level})'

    @property
    def can_manage(self) -> bool:
        return self.level.can_manage
