from django.conf import settings
from django.db import models

from ts.apps.common.model_fields import LabeledEnumField

from .enums import CompanionPermissionLevel
from . import managers


class Companion( models.Model ):
    """
    One directed edge of a companion relationship.

    Edge (grantor=X, grantee=Y, level=L) gives X level L over the trips and
    items Y created. Relationships are always written and removed as a
    pair: the requested edge plus a reciprocal edge at level NONE. Each
    edge is updated only by its own grantor.
    """
    objects = managers.CompanionManager()

    grantor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'companion_edges',
    )
    grantee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'companion_edges_received',
    )
    level = LabeledEnumField(
        CompanionPermissionLevel,
        'Permission Level',
        use_safe_conversion = False,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Companion'
        verbose_name_plural = 'Companions'
        unique_together = [ ( 'grantor', 'grantee' ) ]
        indexes = [
            models.Index( fields = [ 'grantee' ], name = 'companion_grantee_idx' ),
            models.Index( fields = [ 'grantor', 'level' ], name = 'companion_grantor_level_idx' ),
        ]
        ordering = [ '-created_datetime', '-id' ]

    def __str__(self):
        return f'{self.grantor} -> {self.grantee} ({self.level})'
