"""URL configuration for the Cameinw project.

Every API lives under ``/api/``. Authentication endpoints are public;
everything else requires a bearer access token.
"""
from django.conf import settings  # type: ignore
from django.conf.urls.static import static  # type: ignore
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('apps.users.auth_urls', namespace='auth')),
    path('api/', include('apps.users.urls', namespace='users')),
    path('api/', include('apps.places.urls', namespace='places')),
    path('api/', include('apps.reservations.urls', namespace='reservations')),
    path('api/', include('apps.reviews.urls', namespace='reviews')),
    path('api/', include('apps.chat.urls', namespace='chat')),
    path('api/', include('apps.images.urls', namespace='images')),
    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
