from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('', include('apps.dashboard.urls')),

    path('admin/', admin.site.urls),
    path('proyecto/', include('apps.projects.urls')),
    path('marketing/', include('apps.marketing.urls')),
    path('evolucion/', include('apps.evolution.urls')),
    path('costos/', include('apps.costs.urls')),
]
