from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q


class Room(models.Model):
    class RoomType(models.TextChoices):
        SINGLE = "Single"
        DOUBLE = "Double"
        TWIN = "Twin"
        QUEEN = "Queen"
        KING = "King"
        SUITE = "Suite"
        DELUXE = "Deluxe"
        EXECUTIVE = "Executive"
        PRESIDENTIAL = "Presidential"

    class RoomStatus(models.TextChoices):
        AVAILABLE = "available", "Available"
        OCCUPIED = "occupied", "Occupied"
        MAINTENANCE = "maintenance", "Maintenance"
        CHECKOUT = "checkout", "Checkout"
        RESERVED = "reserved", "Reserved"

    class CleaningStatus(models.TextChoices):
        CLEAN = "clean", "Clean"
        DIRTY = "dirty", "Dirty"
        IN_PROGRESS = "in-progress", "In progress"
        INSPECTED = "inspected", "Inspected"
        OUT_OF_ORDER = "out-of-order", "Out of order"

    number = models.CharField(max_length=255, unique=True)
    type = models.CharField(choices=RoomType, max_length=20)
    status = models.CharField(
        choices=RoomStatus, max_length=20, default=RoomStatus.AVAILABLE
    )
    cleaning_status = models.CharField(
        choices=CleaningStatus, max_length=20, default=CleaningStatus.CLEAN
    )
    floor = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    # comma-joined, e.g. "WiFi,AC,TV"
    amenities = models.TextField(blank=True, default="")
    rate = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.CheckConstraint(condition=Q(floor__gte=1), name="room_floor_positive"),
            models.CheckConstraint(condition=Q(rate__gte=0), name="room_rate_non_negative"),
        ]

    def __str__(self):
        return f"Room {self.number}"
