from django.urls import URLPattern, URLResolver, path

from imagecanvas.api.v1.views.health_check import HealthCheckView
from imagecanvas.api.v1.views.resize import BatchResizeView, ResizeView

urlpatterns: list[URLPattern | URLResolver] = [
    path("health/", HealthCheckView.as_view(), name="api-health-check"),
    path("resize/", ResizeView.as_view(), name="api-resize"),
    path("resize-multiple/", BatchResizeView.as_view(), name="api-resize-multiple"),
]
