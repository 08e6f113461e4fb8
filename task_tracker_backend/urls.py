# urls.py

from django.urls import path, include

urlpatterns = [
    path('api/', include('users.urls')),
    path('api/', include('tasks.urls')),
    path('api/', include('comments.urls')),
    path('api/', include('management.urls')),
]

handler404 = 'management.views.route_not_found'
handler500 = 'management.views.server_error'
