from django.urls import include, path

from marathon.admin import site as marathon_admin

urlpatterns = [
    path("admin/", marathon_admin.urls),
    path("api/", include("marathon.urls")),
    path("api-auth/", include("rest_framework.urls")),
]
