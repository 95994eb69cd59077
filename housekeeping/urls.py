from rest_framework.routers import DefaultRouter
from housekeeping.views import HousekeepingTaskViewSet

app_name = "housekeeping"

router = DefaultRouter()
router.register("housekeeping", HousekeepingTaskViewSet, basename="housekeeping")

urlpatterns = router.urls
