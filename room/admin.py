from django.contrib import admin

from room.models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "number", "type", "floor", "status", "cleaning_status", "rate")
    list_editable = ("status", "cleaning_status")
    search_fields = ("number", "amenities")
    list_filter = ("type", "status", "cleaning_status", "floor")
    ordering = ("floor", "number")
    readonly_fields = ("created_at", "updated_at")
