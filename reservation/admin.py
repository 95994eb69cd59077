from django.contrib import admin

from reservation.models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "guest_name",
        "guest_email",
        "room",
        "check_in",
        "check_out",
        "status",
        "total_amount",
    )

    list_filter = (
        "status",
        "check_in",
        "check_out",
        "room",
    )

    search_fields = (
        "guest_name",
        "guest_email",
        "room__number",
    )

    ordering = ("-check_in",)
