from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include(("room.urls", "room"), namespace="room")),
    path("api/", include(("reservation.urls", "reservation"), namespace="reservation")),
    path("api/", include(("housekeeping.urls", "housekeeping"), namespace="housekeeping")),
    path("api/", include(("frontdesk.urls", "frontdesk"), namespace="frontdesk")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
