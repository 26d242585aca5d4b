from django.contrib import admin

from .models import ClientEvolution


@admin.register(ClientEvolution)
class ClientEvolutionAdmin(admin.ModelAdmin):
    """
    고객 추이 관리

    계산 필드는 읽기 전용 (save() 에서 다시 계산)
    """
    list_display = [
        'month_text',
        'month',
        'active_clients',
        'trial_clients',
        'paid_clients',
        'income',
        'expenses',
        'net_income',
        'profit_per_partner',
    ]
    ordering = ['month']
    readonly_fields = ['income', 'net_income', 'profit_per_partner', 'created_at', 'updated_at']

    fieldsets = (
        ('Mes', {
            'fields': ('month', 'month_text')
        }),
        ('Clientes', {
            'fields': ('active_clients', 'trial_clients', 'paid_clients', 'expenses')
        }),
        ('Calculado', {
            'fields': ('income', 'net_income', 'profit_per_partner'),
        }),
        ('Sistema', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
