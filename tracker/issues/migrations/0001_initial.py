import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import issues.models.mixins


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.CharField(default=issues.models.mixins.generate_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=255)),
                ('created_on', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['created_on'],
            },
        ),
        migrations.CreateModel(
            name='Issue',
            fields=[
                ('id', models.CharField(default=issues.models.mixins.generate_object_id, editable=False, max_length=24, primary_key=True, serialize=False)),
                ('issue_title', models.CharField(max_length=255)),
                ('issue_text', models.TextField()),
                ('created_by', models.CharField(max_length=255)),
                ('assigned_to', models.CharField(blank=True, default='', max_length=255)),
                ('status_text', models.CharField(blank=True, default='', max_length=255)),
                ('open', models.BooleanField(default=True)),
                ('created_on', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_on', models.DateTimeField(default=django.utils.timezone.now)),
                ('project', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='issues', to='issues.project')),
            ],
            options={
                'db_table': 'issues',
                'ordering': ['created_on'],
                'indexes': [models.Index(fields=['project', 'created_on'], name='issues_project_created_idx')],
            },
        ),
    ]
