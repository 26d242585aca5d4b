from django.urls import path
from . import views

app_name = 'costs'

urlpatterns = [
    path('', views.cost_list, name='cost_list'),
    path('create/', views.cost_create, name='cost_create'),
    path('<int:pk>/delete/', views.cost_delete, name='cost_delete'),
    path('export/', views.cost_export, name='cost_export'),
]
