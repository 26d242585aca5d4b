from django.urls import path
from . import views

app_name = 'marketing'

urlpatterns = [
    path('', views.campaign_list, name='campaign_list'),
    path('create/', views.campaign_create, name='campaign_create'),
    path('<int:pk>/', views.campaign_detail, name='campaign_detail'),
    path('<int:pk>/stage/', views.campaign_stage_update, name='campaign_stage_update'),

    # Lead
    path('<int:pk>/leads/create/', views.lead_create, name='lead_create'),
    path('leads/<int:pk>/status/', views.lead_status_update, name='lead_status_update'),
]
