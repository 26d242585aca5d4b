from django.contrib import admin

from .models import Project, Task


class TaskInline(admin.TabularInline):
    model = Task
    extra = 0
    fields = ['title', 'status', 'priority', 'assigned_to', 'start_date', 'due_date']
    show_change_link = True


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'status', 'start_date', 'end_date', 'get_task_count', 'created_at']
    list_filter = ['status']
    search_fields = ['name', 'description']
    inlines = [TaskInline]

    @admin.display(description='Tareas')
    def get_task_count(self, obj):
        return obj.tasks.count()


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'project', 'status', 'priority', 'get_assignee', 'start_date', 'due_date']
    list_filter = ['status', 'priority', 'assigned_to']
    search_fields = ['title', 'description']
    date_hierarchy = 'created_at'

    @admin.display(description='Asignado a')
    def get_assignee(self, obj):
        return obj.get_assignee_display()
