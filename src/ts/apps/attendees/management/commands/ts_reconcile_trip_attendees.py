"""
Re-run the trip-to-item attendee cascade so every item of a trip carries
a grant for each trip attendee. Repairs the gaps a partially failed
cascade, or an item created during a cascade, can leave behind.

Usage:
    python manage.py ts_reconcile_trip_attendees             # All trips
    python manage.py ts_reconcile_trip_attendees --trip 42   # One trip
"""
from django.core.management.base import BaseCommand, CommandError

from ts.apps.attendees.cascade import CascadeCoordinator
from ts.apps.trips.models import Trip


class Command(BaseCommand):
    help = 'Grant trip attendees on any of the trip items they are missing from'

    def add_arguments(self, parser):
        parser.add_argument(
            '--trip',
            type=int,
            help='Only reconcile the trip with this id',
        )

    def handle(self, *args, **options):
        trip_queryset = Trip.objects.order_by('pk')
        if options['trip'] is not None:
            trip_queryset = trip_queryset.filter(pk=options['trip'])
            if not trip_queryset.exists():
                raise CommandError(f'Trip {options["trip"]} does not exist')

        cascade_coordinator = CascadeCoordinator()
        total_granted = 0
        for trip_id in trip_queryset.values_list('pk', flat=True):
            cascade_result = cascade_coordinator.reconcile_trip(trip_id)
            if cascade_result.success_count:
                self.stdout.write(f'  Trip {trip_id}: {cascade_result.success_count} grants added')
            total_granted += cascade_result.success_count
            continue

        self.stdout.write(self.style.SUCCESS(f'Reconciled trips, {total_granted} grants added'))
