from django.urls import path
from . import views

app_name = 'projects'

urlpatterns = [
    path('', views.project_list, name='project_list'),
    path('timeline/', views.task_timeline, name='task_timeline'),

    # Project
    path('create/', views.project_create, name='project_create'),
    path('<int:pk>/status/', views.project_status_update, name='project_status_update'),
    path('<int:pk>/delete/', views.project_delete, name='project_delete'),

    # Task
    path('tasks/create/', views.task_create, name='task_create'),
    path('tasks/<int:pk>/status/', views.task_status_update, name='task_status_update'),
    path('tasks/<int:pk>/delete/', views.task_delete, name='task_delete'),
]
