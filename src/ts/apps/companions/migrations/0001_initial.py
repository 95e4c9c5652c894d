import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import ts.apps.common.model_fields
import ts.apps.companions.enums


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Companion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('level', ts.apps.common.model_fields.LabeledEnumField(default='none', enum_class=ts.apps.companions.enums.CompanionPermissionLevel, max_length=32, use_safe_conversion=False, verbose_name='Permission Level')),
                ('created_datetime', models.DateTimeField(auto_now_add=True)),
                ('modified_datetime', models.DateTimeField(auto_now=True)),
                ('grantee', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='companion_edges_received', to=settings.AUTH_USER_MODEL)),
                ('grantor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='companion_edges', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Companion',
                'verbose_name_plural': 'Companions',
                'ordering': ['-created_datetime', '-id'],
                'indexes': [models.Index(fields=['grantee'], name='companion_grantee_idx'), models.Index(fields=['grantor', 'level'], name='companion_grantor_level_idx')],
                'unique_together': {('grantor', 'grantee')},
            },
        ),
    ]
