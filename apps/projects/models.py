# =============================================================================
# projects/models.py - 프로젝트 및 작업 관리
# =============================================================================

"""
프로젝트 및 작업(Task) 관리

상태값은 자유 전환 방식입니다. 어떤 상태에서든 다른 상태로 바로 변경할 수 있으며
전환 조건이나 종료 상태는 두지 않습니다.

Task.project 는 약한 참조입니다. DB 외래키 제약이 없고, 프로젝트를 삭제해도
작업은 그대로 남습니다.
"""
from django.db import models

from apps.core.models import TimeStampedModel
from apps.core.utils import get_assignee_name


class WorkStatus(models.TextChoices):
    PENDING = 'pending', 'Pendiente'
    IN_PROGRESS = 'in_progress', 'En progreso'
    COMPLETED = 'completed', 'Completada'
    CANCELLED = 'cancelled', 'Cancelada'


class Priority(models.TextChoices):
    LOW = 'low', 'Baja'
    MEDIUM = 'medium', 'Media'
    HIGH = 'high', 'Alta'


class Project(TimeStampedModel):
    """프로젝트"""

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=WorkStatus.choices,
        default=WorkStatus.PENDING,
        db_index=True
    )

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Task(TimeStampedModel):
    """프로젝트 작업"""

    project = models.ForeignKey(
        Project,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='tasks'
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    start_date = models.DateField(null=True, blank=True)
    due_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=WorkStatus.choices,
        default=WorkStatus.PENDING,
        db_index=True
    )
    priority = models.CharField(max_length=10, choices=Priority.choices, default=Priority.MEDIUM)
    # 설정(DASHBOARD_ASSIGNEES)의 담당자 id
    assigned_to = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='tasks_project_status_idx'),
        ]

    def __str__(self):
        return self.title

    def get_assignee_display(self):
        return get_assignee_name(self.assigned_to)
