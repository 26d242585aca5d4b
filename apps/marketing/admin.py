from django.contrib import admin

from .models import Campaign, Lead
from .utils import calculate_campaign_metrics


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'source',
        'start_date',
        'end_date',
        'cost',
        'suscrito',
        'get_roi_display',
    ]
    list_filter = ['source']
    search_fields = ['name']
    date_hierarchy = 'start_date'

    fieldsets = (
        ('Campaña', {
            'fields': ('name', 'source', 'start_date', 'end_date', 'cost')
        }),
        ('Embudo', {
            'fields': ('contacto_inicial', 'info_enviada', 'contacto_personal', 'registrado', 'suscrito')
        }),
    )

    @admin.display(description='ROI')
    def get_roi_display(self, obj):
        return f"{calculate_campaign_metrics(obj)['roi']}%"


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ['name', 'campaign', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['name']
