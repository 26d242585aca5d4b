"""고객 추이 폼"""

from decimal import Decimal, InvalidOperation

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.core.utils import MONTH_NAMES, month_name
from .utils import EDITABLE_FIELDS

MONTH_CHOICES = [(name, name) for name in MONTH_NAMES]

# 정수 컬럼(32bit) 범위 안에서 허용하는 최대 입력값
# 고객 수 한도 × 구독 단가(20000) 가 수입 컬럼에 들어가야 함
MAX_CLIENTS = 100000
MAX_EXPENSES = 1000000000

MAX_VALUES = {
    'active_clients': MAX_CLIENTS,
    'trial_clients': MAX_CLIENTS,
    'paid_clients': MAX_CLIENTS,
    'expenses': MAX_EXPENSES,
}

TOO_LARGE_MESSAGE = 'El valor es demasiado grande.'


def _count_field(label, max_value=MAX_CLIENTS):
    return forms.DecimalField(
        label=label,
        min_value=0,
        max_value=max_value,
        required=False,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'min': '0', 'step': '1'}),
        error_messages={
            'min_value': 'El valor no puede ser negativo.',
            'max_value': TOO_LARGE_MESSAGE,
        }
    )


class ClientEvolutionForm(forms.Form):
    """
    월 행 추가 폼

    숫자는 소수 입력도 받고 저장 시 정수로 반올림합니다. (서비스에서 처리)
    """

    month_text = forms.ChoiceField(
        label='Mes',
        choices=MONTH_CHOICES,
        widget=forms.Select(attrs={'class': 'form-select'})
    )
    active_clients = _count_field('Clientes activos')
    trial_clients = _count_field('Clientes en prueba')
    paid_clients = _count_field('Clientes pagos')
    expenses = _count_field('Gastos', max_value=MAX_EXPENSES)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 기본값: 이번 달
        if not self.is_bound:
            self.initial.setdefault('month_text', month_name(timezone.localdate().month))

    def clean(self):
        cleaned_data = super().clean()
        for field in ('active_clients', 'trial_clients', 'paid_clients', 'expenses'):
            if field in cleaned_data and cleaned_data[field] is None:
                cleaned_data[field] = Decimal('0')
        return cleaned_data


class FieldUpdateForm(forms.Form):
    """표에서 셀 1개 수정"""

    field = forms.ChoiceField(choices=[(name, name) for name in EDITABLE_FIELDS])
    value = forms.CharField(required=False)

    def clean(self):
        cleaned_data = super().clean()
        field = cleaned_data.get('field')
        raw = (cleaned_data.get('value') or '').strip()

        if not field:
            return cleaned_data

        if field == 'month_text':
            if raw not in MONTH_NAMES:
                raise ValidationError('Mes inválido.')
            cleaned_data['value'] = raw
            return cleaned_data

        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise ValidationError('Error: Los valores numéricos deben ser enteros')

        if not value.is_finite():
            raise ValidationError('Error: Los valores numéricos deben ser enteros')
        if value < 0:
            raise ValidationError('El valor no puede ser negativo.')
        if value > MAX_VALUES[field]:
            raise ValidationError(TOO_LARGE_MESSAGE)

        cleaned_data['value'] = value
        return cleaned_data
