from django.urls import path
from . import views

app_name = 'evolution'

urlpatterns = [
    path('', views.evolution_list, name='evolution_list'),
    path('create/', views.evolution_create, name='evolution_create'),
    path('<int:pk>/update/', views.evolution_update_field, name='evolution_update_field'),
    path('export/', views.evolution_export, name='evolution_export'),
]
