"""마케팅 캠페인/리드 폼"""

from django import forms
from django.core.exceptions import ValidationError

from .models import Campaign, FunnelStage, Lead

COUNTER_FIELDS = [stage.value for stage in FunnelStage]


class CampaignForm(forms.ModelForm):
    """캠페인 생성 폼 (이름/시작일/종료일 필수)"""

    class Meta:
        model = Campaign
        fields = ['name', 'source', 'start_date', 'end_date', 'cost'] + COUNTER_FIELDS
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nombre de la campaña'}),
            'source': forms.Select(attrs={'class': 'form-select'}),
            'start_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'end_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'cost': forms.NumberInput(attrs={'class': 'form-control', 'min': '0', 'step': '0.01'}),
        }
        labels = {
            'name': 'Nombre de la campaña',
            'source': 'Fuente',
            'start_date': 'Fecha de inicio',
            'end_date': 'Fecha de fin',
            'cost': 'Costo de la campaña',
        }
        error_messages = {
            'name': {'required': 'Por favor, ingresa un nombre para la campaña.'},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # 카운터는 생략 시 0
        for stage in FunnelStage:
            field = self.fields[stage.value]
            field.required = False
            field.label = stage.label
            field.widget.attrs.update({'class': 'form-control', 'min': '0'})
        self.fields['cost'].required = False

    def clean_cost(self):
        cost = self.cleaned_data.get('cost')
        if cost is None:
            return 0
        if cost < 0:
            raise ValidationError('El costo no puede ser negativo.')
        return cost

    def clean(self):
        cleaned_data = super().clean()
        for stage in COUNTER_FIELDS:
            if cleaned_data.get(stage) is None and stage not in self.errors:
                cleaned_data[stage] = 0
        return cleaned_data


class StageCounterForm(forms.Form):
    """퍼널 카운터 1개 수정"""

    stage = forms.ChoiceField(choices=FunnelStage.choices)
    value = forms.IntegerField(min_value=0, error_messages={
        'min_value': 'El valor no puede ser negativo.',
        'invalid': 'Ingresa un número entero.',
    })


class LeadForm(forms.ModelForm):
    """리드 추가 폼 (캠페인은 URL 로 지정)"""

    class Meta:
        model = Lead
        fields = ['name', 'status']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nombre del lead'}),
            'status': forms.Select(attrs={'class': 'form-select'}),
        }
        labels = {
            'name': 'Nombre',
            'status': 'Estado',
        }
        error_messages = {
            'name': {'required': 'Por favor, ingresa un nombre para el lead.'},
        }


class LeadStatusForm(forms.Form):
    status = forms.ChoiceField(choices=FunnelStage.choices)
