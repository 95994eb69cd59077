from frontdesk.transitions import TransitionTable
from reservation.models import Reservation

ReservationStatus = Reservation.ReservationStatus

# confirmed -> checked-in -> checked-out, with cancelled as a side exit.
RESERVATION_TRANSITIONS = TransitionTable(
    "Reservation",
    {
        ReservationStatus.CONFIRMED: (
            ReservationStatus.CHECKED_IN,
            ReservationStatus.CANCELLED,
        ),
        ReservationStatus.CHECKED_IN: (ReservationStatus.CHECKED_OUT,),
        ReservationStatus.CHECKED_OUT: (),
        ReservationStatus.CANCELLED: (),
    },
    messages={
        ReservationStatus.CHECKED_IN: "Check-in is allowed only for confirmed reservations.",
        ReservationStatus.CHECKED_OUT: "Only checked-in reservations can be checked out.",
        ReservationStatus.CANCELLED: "Only confirmed reservations can be cancelled.",
        ReservationStatus.CONFIRMED: "A reservation cannot return to confirmed.",
    },
)
