"""
Give every trip and item creator the manage-level attendee grant they are
supposed to hold. Safe by default (dry-run mode).

Usage:
    python manage.py ts_backfill_creator_grants            # Dry run (preview)
    python manage.py ts_backfill_creator_grants --execute  # Apply changes
"""
from django.core.management.base import BaseCommand

from ts.apps.attendees.enums import AttendeePermissionLevel
from ts.apps.attendees.models import Attendee
from ts.apps.attendees.registry import AttendeeRegistry
from ts.apps.items.resources import ResourceLocator
from ts.apps.trips.enums import ResourceKind
from ts.exceptions import SharingError


class Command(BaseCommand):
    help = 'Add missing creator manage grants on trips and items'

    def add_arguments(self, parser):
        parser.add_argument(
            '--execute',
            action='store_true',
            help='Actually apply changes (default is dry-run)',
        )

    def handle(self, *args, **options):
        execute = options['execute']
        if execute:
            self.stdout.write(self.style.WARNING('=== EXECUTE MODE - Changes will be saved ===\n'))
        else:
            self.stdout.write(self.style.NOTICE('=== DRY RUN - No changes will be saved ===\n'))

        registry = AttendeeRegistry()
        resource_locator = ResourceLocator()
        missing_total = 0
        for resource_kind in ResourceKind:
            missing_count = 0
            model_class = resource_locator.model_for(resource_kind)
            for resource in model_class.objects.order_by('pk').only('pk', 'created_by'):
                has_grant = Attendee.objects.for_resource(resource_kind, resource.pk).filter(
                    account_id=resource.creator_id).exists()
                if has_grant:
                    continue
                missing_count += 1
                if not execute:
                    continue
                try:
                    registry.grant(
                        resource_kind=resource_kind,
                        resource_id=resource.pk,
                        account_id=resource.creator_id,
                        level=AttendeePermissionLevel.MANAGE,
                        granted_by_id=resource.creator_id,
                    )
                except SharingError as e:
                    self.stdout.write(self.style.ERROR(f'  {resource_kind}:{resource.pk}: {e}'))
                continue

            self.stdout.write(f'{resource_kind.label}: {missing_count} missing creator grants')
            missing_total += missing_count
            continue

        action = 'Added' if execute else 'Would add'
        self.stdout.write(self.style.SUCCESS(f'{action} {missing_total} creator grants'))
