"""고정비 폼"""

from django import forms
from django.core.exceptions import ValidationError

from .models import CostEntry


class CostEntryForm(forms.ModelForm):
    """고정비 등록 (설명 필수, 금액 > 0)"""

    class Meta:
        model = CostEntry
        fields = ['description', 'amount', 'frequency', 'start_date']
        widgets = {
            'description': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Descripción'}),
            'amount': forms.NumberInput(attrs={'class': 'form-control', 'min': '0.01', 'step': '0.01'}),
            'frequency': forms.Select(attrs={'class': 'form-select'}),
            'start_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
        }
        labels = {
            'description': 'Descripción',
            'amount': 'Monto',
            'frequency': 'Frecuencia',
            'start_date': 'Fecha de inicio',
        }
        error_messages = {
            'description': {
                'required': 'Por favor, ingresa una descripción.',
            },
            'amount': {
                'min_value': 'El monto debe ser mayor a 0.',
            },
        }

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if amount is None or amount <= 0:
            raise ValidationError('El monto debe ser mayor a 0.')
        return amount


class MonthFilterForm(forms.Form):
    month = forms.CharField(
        required=False,
        label='Filtrar por mes',
        widget=forms.TextInput(attrs={'type': 'month', 'class': 'form-control'})
    )
