"""
Grants reference their resource polymorphically, so the database cannot
cascade their deletion. These receivers do it instead.
"""
import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from ts.apps.items.models import CarRental, Event, Flight, Hotel, Transportation
from ts.apps.trips.models import Trip

from .models import Attendee

logger = logging.getLogger(__name__)


@receiver( post_delete, sender = Trip )
@receiver( post_delete, sender = Flight )
@receiver( post_delete, sender = Hotel )
@receiver( post_delete, sender = Event )
@receiver( post_delete, sender = Transportation )
@receiver( post_delete, sender = CarRental )
def remove_resource_grants( sender, instance, **kwargs ):
    deleted_count, _ = Attendee.objects.for_resource(
        instance.resource_kind,
        instance.pk,
    ).delete()
    if deleted_count:
        logger.debug( f'Removed {deleted_count} grants of deleted'
                      f' {instance.resource_kind}:{instance.pk}' )
    return
