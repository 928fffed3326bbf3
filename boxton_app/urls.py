from django.urls import path
from . import views

urlpatterns = [
    # Layout preview
    path('', views.preview_view, name='home'),
    path('preview/', views.preview_view, name='preview'),
]
