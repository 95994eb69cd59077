from django.contrib import admin

from housekeeping.models import HousekeepingTask


@admin.register(HousekeepingTask)
class HousekeepingTaskAdmin(admin.ModelAdmin):
    list_display = ("id", "room", "type", "priority", "assigned_to", "status", "scheduled_time")
    search_fields = ("assigned_to", "room__number")
    list_filter = ("status", "priority", "type")
