"""
Plant Match - Local seller reservations and delivery rules
"""
import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, List, Optional
from plant_match_models import (
    SellerOffer, FulfillmentMode, ContactInfo, TimeSlot, Reservation,
    ReservationStatus, ReservationErrorKind, ReservationResult,
    ReservationConfirmedEvent
)
from config import (
    DELIVERY_RADIUS_KM, RESERVATION_HOLD_HOURS, LOW_STOCK_THRESHOLD,
    PICKUP_DAYS_AHEAD, PICKUP_TIME_WINDOWS
)

logger = logging.getLogger(__name__)

ReservationListener = Callable[[ReservationConfirmedEvent], None]


def _refuse(kind: ReservationErrorKind, message: str) -> ReservationResult:
    if kind == ReservationErrorKind.INVALID_STATE:
        logger.error(f"Reservation refused ({kind.value}): {message}")
    else:
        logger.warning(f"Reservation refused ({kind.value}): {message}")
    return ReservationResult(success=False, error=kind, message=message)


def _new_reservation_id() -> str:
    return f"RES-{uuid.uuid4().hex[:12].upper()}"


def check_delivery_eligible(offer: SellerOffer) -> bool:
    """Same-day delivery is offered only within the delivery radius (inclusive)"""
    return offer.distance_km <= DELIVERY_RADIUS_KM


def is_low_stock(offer: SellerOffer) -> bool:
    return 0 < offer.stock < LOW_STOCK_THRESHOLD


def available_modes(offer: SellerOffer) -> List[FulfillmentMode]:
    """Fulfillment modes a customer may choose for this offer"""
    if offer.stock <= 0:
        return []
    if check_delivery_eligible(offer):
        return [FulfillmentMode.PICKUP, FulfillmentMode.DELIVERY]
    return [FulfillmentMode.PICKUP]


def rank_offers_by_distance(offers: Iterable[SellerOffer]) -> List[SellerOffer]:
    """Nearest sellers first; ties broken by seller id"""
    return sorted(offers, key=lambda offer: (offer.distance_km, offer.seller_id))


def available_pickup_slots(
    today: date,
    days: int = PICKUP_DAYS_AHEAD,
    windows: Optional[List[str]] = None,
) -> List[TimeSlot]:
    """Enumerate pickup slots for `days` days starting today, every window each day"""
    windows = PICKUP_TIME_WINDOWS if windows is None else windows
    return [
        TimeSlot(pickup_date=today + timedelta(days=offset), window=window)
        for offset in range(days)
        for window in windows
    ]


def begin_reservation(plant_key: str, offer: SellerOffer, mode: FulfillmentMode) -> ReservationResult:
    """
    Stage a reservation in memory.

    Checks, first failure wins:
    1. The offer must have stock
    2. Delivery requires the seller to be within the delivery radius

    Returns a PENDING reservation without id or timestamps.
    """
    mode = FulfillmentMode(mode)

    if offer.stock <= 0:
        return _refuse(
            ReservationErrorKind.OUT_OF_STOCK,
            f"{offer.seller_name or offer.seller_id} has no '{plant_key}' in stock",
        )

    if mode == FulfillmentMode.DELIVERY and not check_delivery_eligible(offer):
        return _refuse(
            ReservationErrorKind.DELIVERY_RANGE_EXCEEDED,
            f"Seller is {offer.distance_km:.1f} km away; delivery is only available within "
            f"{DELIVERY_RADIUS_KM:.0f} km. Choose pickup instead.",
        )

    if offer.plant_key != plant_key:
        return _refuse(
            ReservationErrorKind.VALIDATION_ERROR,
            f"Offer from seller {offer.seller_id} is for '{offer.plant_key}', not '{plant_key}'",
        )

    reservation = Reservation(plant_key=plant_key, offer=offer, mode=mode)
    return ReservationResult(success=True, reservation=reservation, message="Reservation staged")


def _validate_contact(contact: Optional[ContactInfo]) -> Optional[str]:
    if contact is None:
        return "Contact details are required"
    if not contact.name.strip():
        return "Name is required"
    if not contact.phone.strip():
        return "Phone number is required"
    if contact.email and "@" not in contact.email:
        return f"Email '{contact.email}' is not a valid address"
    return None


def _validate_slot(
    slot: Optional[TimeSlot],
    now: datetime,
    available_slots: Optional[List[TimeSlot]],
) -> Optional[str]:
    if slot is None:
        return "A pickup date and time slot are required"
    if slot.starts_at(tzinfo=now.tzinfo) <= now:
        return f"Pickup slot {slot.pickup_date.isoformat()} {slot.window} is in the past"
    if available_slots is not None and slot not in available_slots:
        return f"Pickup slot {slot.pickup_date.isoformat()} {slot.window} is not available"
    return None


def confirm_reservation(
    pending: Reservation,
    contact: Optional[ContactInfo],
    slot: Optional[TimeSlot] = None,
    *,
    now: datetime,
    available_slots: Optional[List[TimeSlot]] = None,
    listeners: Optional[List[ReservationListener]] = None,
    payment_method: str = "cash",
) -> ReservationResult:
    """
    Confirm a pending reservation at time `now`.

    Pickup reservations need a future slot and are held for RESERVATION_HOLD_HOURS.
    Delivery reservations have no hold and are handed to fulfillment as-is.
    On success every listener receives a ReservationConfirmedEvent; the
    event is also returned on the result.
    """
    if pending.status != ReservationStatus.PENDING:
        return _refuse(
            ReservationErrorKind.INVALID_STATE,
            f"Cannot confirm reservation in state '{pending.status.value}'",
        )

    if now.tzinfo is None:
        return _refuse(ReservationErrorKind.VALIDATION_ERROR, "Confirmation time must be timezone-aware")

    problem = _validate_contact(contact)
    if problem is None and pending.mode == FulfillmentMode.PICKUP:
        problem = _validate_slot(slot, now, available_slots)
    if problem is not None:
        return _refuse(ReservationErrorKind.VALIDATION_ERROR, problem)

    expires_at = None
    if pending.mode == FulfillmentMode.PICKUP:
        expires_at = now + timedelta(hours=RESERVATION_HOLD_HOURS)

    confirmed = pending.model_copy(update={
        "id": _new_reservation_id(),
        "status": ReservationStatus.CONFIRMED,
        "contact": contact,
        "slot": slot if pending.mode == FulfillmentMode.PICKUP else None,
        "payment_method": payment_method,
        "created_at": now,
        "expires_at": expires_at,
    })

    event = ReservationConfirmedEvent(reservation=confirmed, occurred_at=now)
    for listener in listeners or []:
        listener(event)

    logger.info(
        f"Confirmed {confirmed.mode.value} reservation {confirmed.id} for '{confirmed.plant_key}' "
        f"from seller {confirmed.offer.seller_id}"
    )
    return ReservationResult(
        success=True,
        reservation=confirmed,
        message="Reservation confirmed",
        event=event,
    )


def is_expired(reservation: Reservation, now: datetime) -> bool:
    """
    A confirmed pickup hold lapses strictly after its expiry; deliveries never expire.

    `now` must be timezone-aware, as in confirm_reservation; a naive
    datetime raises ValueError.
    """
    if now.tzinfo is None:
        raise ValueError("Expiry check time must be timezone-aware")
    if reservation.mode != FulfillmentMode.PICKUP or reservation.expires_at is None:
        return False
    return now > reservation.expires_at


def reservation_state(reservation: Reservation, now: datetime) -> ReservationStatus:
    """Effective lifecycle state at `now` (expiry is read, never written)"""
    if reservation.status == ReservationStatus.CONFIRMED and is_expired(reservation, now):
        return ReservationStatus.EXPIRED
    return reservation.status


def cancel_reservation(reservation: Reservation) -> ReservationResult:
    """Cancel a reservation that has not been confirmed yet"""
    if reservation.status != ReservationStatus.PENDING:
        return _refuse(
            ReservationErrorKind.INVALID_STATE,
            f"Cannot cancel reservation in state '{reservation.status.value}'",
        )
    cancelled = reservation.model_copy(update={"status": ReservationStatus.CANCELLED})
    logger.info(f"Cancelled pending reservation for '{cancelled.plant_key}'")
    return ReservationResult(success=True, reservation=cancelled, message="Reservation cancelled")
