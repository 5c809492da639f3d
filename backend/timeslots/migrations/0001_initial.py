from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='TimeSlot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('start_time', models.TimeField(help_text='Start of the pickup window (inclusive)')),
                ('end_time', models.TimeField(help_text='End of the pickup window (exclusive)')),
                ('max_orders', models.PositiveIntegerField(help_text='Maximum orders accepted for this slot')),
                ('current_orders', models.PositiveIntegerField(default=0, help_text='Orders currently booked against this slot')),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Time Slot',
                'verbose_name_plural': 'Time Slots',
                'ordering': ['start_time'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('start_time__lt', models.F('end_time'))), name='timeslot_start_before_end'),
                    models.CheckConstraint(condition=models.Q(('current_orders__gte', 0)), name='timeslot_current_orders_non_negative'),
                ],
                'indexes': [models.Index(fields=['is_active', 'start_time'], name='timeslot_active_start_idx')],
            },
        ),
    ]
