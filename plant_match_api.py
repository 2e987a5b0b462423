"""
FastAPI endpoints for the Plant Match quiz and local reservations
"""
from fastapi import APIRouter, HTTPException
from typing import List, Dict, Optional
from pydantic import BaseModel, Field
from datetime import date, datetime, timezone
import logging
from plant_match_models import (
    QuizQuestion, PlantProfile, ScoredRecommendation, SellerOffer, FulfillmentMode,
    ContactInfo, TimeSlot, Reservation, ReservationStatus, ReservationErrorKind,
    ReservationResult
)
from plant_match_logic import PlantMatchEngine
from plant_match_reservations import (
    check_delivery_eligible, is_low_stock, available_modes, rank_offers_by_distance,
    available_pickup_slots, begin_reservation, confirm_reservation, is_expired,
    reservation_state
)
from plant_match_storage import get_storage
from geolocation import resolve_offer_distances, geocode_location

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plant-match", tags=["plant-match"])

engine = PlantMatchEngine()

ERROR_STATUS_CODES = {
    ReservationErrorKind.OUT_OF_STOCK: 409,
    ReservationErrorKind.INVALID_STATE: 409,
    ReservationErrorKind.DELIVERY_RANGE_EXCEEDED: 422,
    ReservationErrorKind.VALIDATION_ERROR: 422,
}


class QuizAnswersRequest(BaseModel):
    answers: Dict[str, str] = Field(..., description="Option value chosen per question id")


class QuizResultResponse(BaseModel):
    recommendations: List[ScoredRecommendation]
    primary: Optional[ScoredRecommendation] = None


class RankOffersRequest(BaseModel):
    offers: List[SellerOffer]
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location: Optional[str] = Field(None, description="Place name, geocoded when coordinates are not given")


class RankedOffer(BaseModel):
    offer: SellerOffer
    delivery_eligible: bool
    low_stock: bool
    modes: List[FulfillmentMode]


class ReservationRequest(BaseModel):
    plant_key: str
    offer: SellerOffer
    mode: FulfillmentMode
    contact: ContactInfo
    slot: Optional[TimeSlot] = None
    payment_method: str = "cash"


class ReservationStatusResponse(BaseModel):
    reservation_id: str
    status: ReservationStatus
    expired: bool
    expires_at: Optional[datetime] = None


def _raise_for_result(result: ReservationResult) -> None:
    if not result.success:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES.get(result.error, 400),
            detail={"error": result.error.value if result.error else None, "message": result.message},
        )


@router.get("/quiz/questions", response_model=List[QuizQuestion])
async def get_quiz_questions():
    """Quiz questions in the order they are asked"""
    return engine.questions


@router.get("/quiz/catalog", response_model=List[PlantProfile])
async def get_catalog():
    return engine.catalog


@router.post("/quiz/score", response_model=QuizResultResponse)
async def score_quiz(request: QuizAnswersRequest):
    """
    Score quiz answers and return ranked plant recommendations.

    Example:
    {
        "answers": {"lifestyle": "busy", "light": "low", "experience": "beginner"}
    }
    """
    try:
        response = engine.build_response(request.answers)
    except KeyError as e:
        raise HTTPException(status_code=422, detail=str(e.args[0]))

    recommendations = engine.score(response)
    return QuizResultResponse(
        recommendations=recommendations,
        primary=recommendations[0] if recommendations else None,
    )


@router.post("/offers/rank", response_model=List[RankedOffer])
async def rank_offers(request: RankOffersRequest):
    """
    Sort seller offers by distance and annotate delivery/pickup availability.

    When the requester's coordinates are given (or a place name that can be
    geocoded), distances are recomputed for sellers with known coordinates.

    Example:
    {
        "offers": [...],
        "location": "Koregaon Park, Pune"
    }
    """
    offers = request.offers
    latitude, longitude = request.latitude, request.longitude
    if (latitude is None or longitude is None) and request.location:
        coordinates = geocode_location(request.location)
        if coordinates is None:
            raise HTTPException(status_code=422, detail=f"Location '{request.location}' not found")
        latitude, longitude = coordinates.latitude, coordinates.longitude

    if latitude is not None and longitude is not None:
        offers = resolve_offer_distances(offers, latitude, longitude)

    return [
        RankedOffer(
            offer=offer,
            delivery_eligible=check_delivery_eligible(offer),
            low_stock=is_low_stock(offer),
            modes=available_modes(offer),
        )
        for offer in rank_offers_by_distance(offers)
    ]


@router.get("/pickup-slots", response_model=List[TimeSlot])
async def get_pickup_slots(start: Optional[date] = None):
    """Pickup slots for the next week"""
    return available_pickup_slots(start or datetime.now(timezone.utc).date())


@router.post("/reservations", response_model=Reservation)
async def create_reservation(request: ReservationRequest):
    """
    Reserve a plant from a seller for pickup or delivery.

    This endpoint:
    1. Checks stock and delivery range
    2. Validates contact details and the pickup slot
    3. Confirms the reservation at the server clock
    4. Stores the confirmed reservation
    """
    staged = begin_reservation(request.plant_key, request.offer, request.mode)
    _raise_for_result(staged)

    confirmed = confirm_reservation(
        staged.reservation,
        request.contact,
        request.slot,
        now=datetime.now(timezone.utc),
        payment_method=request.payment_method,
    )
    _raise_for_result(confirmed)

    try:
        return get_storage().create_reservation(confirmed.reservation)
    except Exception as e:
        logger.error(f"Error storing reservation: {e}")
        raise HTTPException(status_code=500, detail=str(e))


def _load_reservation(reservation_id: str) -> Reservation:
    reservation = get_storage().get_reservation(reservation_id)
    if not reservation:
        raise HTTPException(status_code=404, detail=f"Reservation {reservation_id} not found")
    return reservation


@router.get("/reservations/{reservation_id}", response_model=Reservation)
async def get_reservation(reservation_id: str):
    return _load_reservation(reservation_id)


@router.get("/reservations/{reservation_id}/status", response_model=ReservationStatusResponse)
async def get_reservation_status(reservation_id: str, now: Optional[datetime] = None):
    """Effective reservation state at `now` (defaults to the server clock)"""
    reservation = _load_reservation(reservation_id)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return ReservationStatusResponse(
        reservation_id=reservation_id,
        status=reservation_state(reservation, now),
        expired=is_expired(reservation, now),
        expires_at=reservation.expires_at,
    )
