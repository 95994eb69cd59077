from django.urls import path

from frontdesk.views import DashboardView, PropertySettingsView

app_name = "frontdesk"

urlpatterns = [
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("settings/", PropertySettingsView.as_view(), name="settings"),
]
