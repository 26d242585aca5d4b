from django.contrib import admin

from .models import CostEntry
from apps.core.utils import to_decimal
from .utils import monthly_amount


@admin.register(CostEntry)
class CostEntryAdmin(admin.ModelAdmin):
    list_display = ['description', 'amount', 'frequency', 'get_monthly_amount', 'start_date']
    list_filter = ['frequency']
    search_fields = ['description']
    date_hierarchy = 'start_date'

    @admin.display(description='Monto mensual')
    def get_monthly_amount(self, obj):
        return to_decimal(monthly_amount(obj))
