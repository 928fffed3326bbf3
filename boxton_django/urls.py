from django.urls import include, path

urlpatterns = [
    path('', include('boxton_app.urls')),
]
