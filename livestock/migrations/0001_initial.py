# Generated manually for the livestock registry and disease surveillance models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import phonenumber_field.modelfields
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Animal',
            fields=[
                ('province', models.CharField(db_index=True, max_length=100)),
                ('district', models.CharField(db_index=True, max_length=100)),
                ('sector', models.CharField(db_index=True, max_length=100)),
                ('cell', models.CharField(blank=True, max_length=100)),
                ('village', models.CharField(blank=True, max_length=100)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('animal_id', models.CharField(help_text='Tag number (e.g., ANM000001)', max_length=20, unique=True)),
                ('species', models.CharField(db_index=True, max_length=50)),
                ('breed', models.CharField(blank=True, max_length=100)),
                ('age', models.PositiveIntegerField(default=0, help_text='Age in months')),
                ('sex', models.CharField(choices=[('male', 'Male'), ('female', 'Female')], max_length=10)),
                ('color', models.CharField(blank=True, max_length=50)),
                ('identification_marks', models.TextField(blank=True)),
                ('owner_name', models.CharField(db_index=True, max_length=200)),
                ('owner_contact', phonenumber_field.modelfields.PhoneNumberField(blank=True, max_length=128, region='RW')),
                ('owner_address', models.CharField(blank=True, max_length=255)),
                ('health_status', models.CharField(choices=[('healthy', 'Healthy'), ('sick', 'Sick'), ('under_treatment', 'Under Treatment'), ('recovered', 'Recovered'), ('deceased', 'Deceased')], db_index=True, default='healthy', max_length=20)),
                ('registered_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('last_updated', models.DateTimeField(auto_now=True)),
                ('registered_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='registered_animals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'animals',
                'ordering': ['-registered_date'],
                'indexes': [
                    models.Index(fields=['province', 'district', 'sector'], name='animals_location_idx'),
                    models.Index(fields=['species', 'health_status'], name='animals_species_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='VaccinationRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('vaccine_name', models.CharField(max_length=200)),
                ('date_administered', models.DateField()),
                ('next_due_date', models.DateField(blank=True, null=True)),
                ('administered_by', models.CharField(max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('animal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vaccination_history', to='livestock.animal')),
            ],
            options={
                'db_table': 'vaccination_records',
                'ordering': ['date_administered', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='DiseaseCase',
            fields=[
                ('province', models.CharField(db_index=True, max_length=100)),
                ('district', models.CharField(db_index=True, max_length=100)),
                ('sector', models.CharField(db_index=True, max_length=100)),
                ('cell', models.CharField(blank=True, max_length=100)),
                ('village', models.CharField(blank=True, max_length=100)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('report_id', models.CharField(help_text='Report number (e.g., DIS000001)', max_length=20, unique=True)),
                ('disease_name', models.CharField(db_index=True, max_length=200)),
                ('disease_type', models.CharField(choices=[('viral', 'Viral'), ('bacterial', 'Bacterial'), ('parasitic', 'Parasitic'), ('fungal', 'Fungal'), ('other', 'Other')], db_index=True, max_length=20)),
                ('symptoms', models.JSONField(blank=True, default=list)),
                ('severity', models.CharField(choices=[('mild', 'Mild'), ('moderate', 'Moderate'), ('severe', 'Severe'), ('critical', 'Critical')], db_index=True, max_length=20)),
                ('diagnosis_date', models.DateField(db_index=True)),
                ('diagnosis_method', models.CharField(blank=True, max_length=200)),
                ('treatment_provided', models.TextField(blank=True)),
                ('outcome', models.CharField(choices=[('ongoing', 'Ongoing'), ('under_treatment', 'Under Treatment'), ('recovered', 'Recovered'), ('deceased', 'Deceased')], db_index=True, default='ongoing', max_length=30)),
                ('is_outbreak', models.BooleanField(db_index=True, default=False)),
                ('affected_animals_count', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('notes', models.TextField(blank=True)),
                ('reported_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('animal', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='disease_cases', to='livestock.animal')),
                ('reported_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reported_cases', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'disease_cases',
                'ordering': ['-reported_date'],
                'indexes': [
                    models.Index(fields=['province', 'district', 'sector'], name='cases_location_idx'),
                    models.Index(fields=['severity', 'is_outbreak'], name='cases_severity_outbreak_idx'),
                    models.Index(fields=['reported_date', 'province'], name='cases_reported_province_idx'),
                ],
            },
        ),
    ]
