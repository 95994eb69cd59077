from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F, ForeignKey, Q

from room.models import Room


class Reservation(models.Model):
    class ReservationStatus(models.TextChoices):
        CONFIRMED = "confirmed", "Confirmed"
        CHECKED_IN = "checked-in", "Checked in"
        CHECKED_OUT = "checked-out", "Checked out"
        CANCELLED = "cancelled", "Cancelled"

    room = ForeignKey(Room, on_delete=models.PROTECT, related_name="reservations")
    guest_name = models.CharField(max_length=255)
    guest_email = models.EmailField()
    guest_phone = models.CharField(max_length=50)
    check_in = models.DateField()
    check_out = models.DateField()
    status = models.CharField(
        choices=ReservationStatus,
        max_length=20,
        default=ReservationStatus.CONFIRMED,
    )
    total_amount = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    notes = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out__gt=F("check_in")),
                name="check_out_after_check_in",
            ),
            models.CheckConstraint(
                condition=Q(total_amount__gte=0),
                name="reservation_total_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.guest_name} ({self.check_in} - {self.check_out})"
