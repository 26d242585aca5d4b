"""프로젝트/작업 폼"""

from django import forms

from apps.core.utils import get_assignees
from .models import Project, Task, WorkStatus


class ProjectForm(forms.ModelForm):
    """프로젝트 생성 폼"""

    class Meta:
        model = Project
        fields = ['name', 'description', 'start_date', 'end_date', 'status']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Nombre del proyecto'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'start_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'end_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'status': forms.Select(attrs={'class': 'form-select'}),
        }
        labels = {
            'name': 'Nombre',
            'description': 'Descripción',
            'start_date': 'Fecha de inicio',
            'end_date': 'Fecha de fin',
            'status': 'Estado',
        }
        # CharField 가 공백을 제거한 뒤 required 검사
        error_messages = {
            'name': {'required': 'Por favor, ingresa un nombre para el proyecto.'},
        }


class TaskForm(forms.ModelForm):
    """작업 생성 폼"""

    assigned_to = forms.ChoiceField(
        required=False,
        widget=forms.Select(attrs={'class': 'form-select'}),
        label='Asignar a usuario'
    )

    class Meta:
        model = Task
        fields = ['project', 'title', 'description', 'start_date', 'due_date', 'priority', 'status', 'assigned_to']
        widgets = {
            'project': forms.Select(attrs={'class': 'form-select'}),
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Título de la tarea'}),
            'description': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
            'start_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'due_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'priority': forms.Select(attrs={'class': 'form-select'}),
            'status': forms.Select(attrs={'class': 'form-select'}),
        }
        labels = {
            'project': 'Proyecto',
            'title': 'Título',
            'description': 'Descripción',
            'start_date': 'Fecha de inicio',
            'due_date': 'Fecha límite',
            'priority': 'Prioridad',
            'status': 'Estado',
        }
        error_messages = {
            'title': {'required': 'Por favor, ingresa un título.'},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # 담당자 선택지: 설정에 등록된 사용자
        self.fields['assigned_to'].choices = [('', 'Seleccione un usuario')] + [
            (assignee['id'], assignee['name']) for assignee in get_assignees()
        ]
        self.fields['project'].required = True
        self.fields['project'].empty_label = 'Seleccione un proyecto'

    def clean_assigned_to(self):
        return self.cleaned_data.get('assigned_to') or None


class StatusForm(forms.Form):
    """상태 변경 폼 (프로젝트/작업 공용)"""

    status = forms.ChoiceField(choices=WorkStatus.choices)


class TaskFilterForm(forms.Form):
    """작업 목록 필터"""

    STATUS_CHOICES = [('', 'Todas')] + list(WorkStatus.choices)

    project = forms.ModelChoiceField(
        queryset=Project.objects.all(),
        required=False,
        empty_label='Todos los proyectos',
        widget=forms.Select(attrs={'class': 'form-select'}),
        label='Proyecto'
    )
    status = forms.ChoiceField(
        choices=STATUS_CHOICES,
        required=False,
        widget=forms.Select(attrs={'class': 'form-select'}),
        label='Estado'
    )
