import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import ts.apps.attendees.enums
import ts.apps.common.model_fields
import ts.apps.trips.enums


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Attendee',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('resource_kind', ts.apps.common.model_fields.LabeledEnumField(default='trip', enum_class=ts.apps.trips.enums.ResourceKind, max_length=32, use_safe_conversion=False, verbose_name='Resource Kind')),
                ('resource_id', models.PositiveBigIntegerField()),
                ('level', ts.apps.common.model_fields.LabeledEnumField(default='view', enum_class=ts.apps.attendees.enums.AttendeePermissionLevel, max_length=32, use_safe_conversion=False, verbose_name='Permission Level')),
                ('created_datetime', models.DateTimeField(auto_now_add=True)),
                ('modified_datetime', models.DateTimeField(auto_now=True)),
                ('account', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attendee_grants', to=settings.AUTH_USER_MODEL)),
                ('granted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='attendee_grants_given', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Attendee',
                'verbose_name_plural': 'Attendees',
                'ordering': ['created_datetime', 'id'],
                'indexes': [models.Index(fields=['resource_kind', 'resource_id'], name='attendee_resource_idx')],
                'unique_together': {('account', 'resource_kind', 'resource_id')},
            },
        ),
    ]
