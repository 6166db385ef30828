"""
URL configuration for tracker project.

- /api/issues/<project>  issue resource
- /api/schema/           OpenAPI schema
- /api/docs/             Swagger UI
- /admin/                Django admin
"""
# tracker/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/issues/", include("issues.urls")),
]
