from django.contrib import admin

from .models import Animal, DiseaseCase, VaccinationRecord
from .services.registration import next_animal_tag, next_report_id


class VaccinationRecordInline(admin.TabularInline):
    model = VaccinationRecord
    extra = 0
    fields = ('vaccine_name', 'date_administered', 'next_due_date', 'administered_by')


@admin.register(Animal)
class AnimalAdmin(admin.ModelAdmin):
    list_display = (
        'animal_id', 'species', 'breed', 'owner_name', 'health_status',
        'province', 'district', 'sector', 'registered_date'
    )
    list_filter = ('species', 'health_status', 'sex', 'province', 'registered_date')
    search_fields = ('animal_id', 'owner_name', 'breed')
    readonly_fields = ('id', 'animal_id', 'registered_date', 'last_updated')
    date_hierarchy = 'registered_date'
    inlines = [VaccinationRecordInline]

    fieldsets = (
        ('Animal', {
            'fields': ('id', 'animal_id', 'species', 'breed', 'age', 'sex', 'color', 'identification_marks')
        }),
        ('Owner', {
            'fields': ('owner_name', 'owner_contact', 'owner_address')
        }),
        ('Location', {
            'fields': ('province', 'district', 'sector', 'cell', 'village', 'latitude', 'longitude')
        }),
        ('Health', {
            'fields': ('health_status',)
        }),
        ('Audit', {
            'fields': ('registered_by', 'registered_date', 'last_updated'),
            'classes': ('collapse',)
        }),
    )

    def save_model(self, request, obj, form, change):
        if not change:
            obj.animal_id = next_animal_tag()
            obj.registered_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(DiseaseCase)
class DiseaseCaseAdmin(admin.ModelAdmin):
    list_display = (
        'report_id', 'disease_name', 'disease_type', 'severity', 'outcome',
        'is_outbreak', 'province', 'district', 'sector', 'reported_date'
    )
    list_filter = ('disease_type', 'severity', 'outcome', 'is_outbreak', 'province', 'reported_date')
    search_fields = ('report_id', 'disease_name', 'animal__animal_id')
    raw_id_fields = ('animal',)
    date_hierarchy = 'reported_date'

    # Location snapshot is fixed at reporting time
    readonly_fields = (
        'id', 'report_id', 'province', 'district', 'sector', 'cell', 'village',
        'latitude', 'longitude', 'reported_date', 'updated_at'
    )

    def save_model(self, request, obj, form, change):
        if not change:
            obj.report_id = next_report_id()
            obj.reported_by = request.user
            if obj.animal_id:
                obj.snapshot_location_from(obj.animal)
        super().save_model(request, obj, form, change)
