"""
Data models for the Plant Match quiz and local reservation module
"""
from typing import List, Optional, Dict
from pydantic import BaseModel, Field, field_validator
from enum import Enum
from datetime import date, datetime, time


class AnswerOption(BaseModel):
    """A choice for a quiz question and the points it awards per plant key"""
    value: str = Field(..., description="Option identifier, unique within its question")
    text: str = Field("", description="Option label shown to the user")
    points: Dict[str, int] = Field(default_factory=dict, description="Points awarded per plant key")

    @field_validator('points')
    @classmethod
    def validate_points(cls, v):
        """Point values must be non-negative"""
        for plant_key, points in v.items():
            if points < 0:
                raise ValueError(f"Negative points ({points}) for plant '{plant_key}'")
        return v


class QuizQuestion(BaseModel):
    """Quiz question with its ordered answer options"""
    id: str = Field(..., description="Question identifier")
    prompt: str = Field(..., description="Question text")
    options: List[AnswerOption] = Field(..., description="Ordered answer options")

    def get_option(self, value: str) -> Optional[AnswerOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None


class ExpertSignal(BaseModel):
    """Question/answer pair that marks an experienced user"""
    question_id: str
    option_value: str


class QuizResponse(BaseModel):
    """A user's answers for one quiz session, one option per question"""
    answers: Dict[str, AnswerOption] = Field(default_factory=dict, description="Chosen option per question id")

    def with_answer(self, question_id: str, option: AnswerOption) -> "QuizResponse":
        """Return a copy with the question answered (re-answering replaces the old choice)"""
        answers = dict(self.answers)
        answers[question_id] = option
        return QuizResponse(answers=answers)


class PlantProfile(BaseModel):
    """Static catalog entry for a plant archetype"""
    key: str = Field(..., description="Plant key")
    name: str = Field(..., description="Display name")
    subtitle: str = ""
    description: str = ""
    care: str = ""
    personality: str = ""
    tips: List[str] = Field(default_factory=list)
    difficulty: int = Field(..., ge=1, le=5, description="Care difficulty, 1 (easy) to 5 (hard)")
    price: float = Field(..., ge=0, description="Indicative price in INR")


class QuizConfig(BaseModel):
    """Question bank, catalog and expert flag supplied at session start"""
    questions: List[QuizQuestion]
    catalog: List[PlantProfile]
    expert_signal: Optional[ExpertSignal] = None


class ScoredRecommendation(BaseModel):
    """Plant recommendation produced by the match engine"""
    profile: PlantProfile
    score: int = Field(..., ge=0, description="Raw additive score")
    match_percentage: int = Field(..., ge=0, le=100, description="Score relative to the top score")


class FulfillmentMode(str, Enum):
    """How the customer receives the plant"""
    PICKUP = "pickup"
    DELIVERY = "delivery"


class SellerOffer(BaseModel):
    """A seller's offer for a plant, relative to the requester"""
    seller_id: str = Field(..., description="Seller ID")
    seller_name: str = Field("", description="Shop name")
    plant_key: str = Field(..., description="Plant key being offered")
    distance_km: float = Field(..., ge=0, description="Distance from the requester in km")
    price: float = Field(..., ge=0, description="Unit price")
    stock: int = Field(..., ge=0, description="Units in stock")
    delivery_time: str = Field("", description="Delivery time descriptor, e.g. '2-3 hours'")
    address: Optional[str] = None
    phone: Optional[str] = None
    rating: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    verified: bool = False


class ContactInfo(BaseModel):
    """Requester contact details"""
    name: str = ""
    phone: str = ""
    email: Optional[str] = None
    special_instructions: Optional[str] = None


class TimeSlot(BaseModel):
    """Pickup slot: a date and an hourly window such as '10:00 AM - 11:00 AM'"""
    pickup_date: date = Field(..., description="Pickup date")
    window: str

    @field_validator('window')
    @classmethod
    def validate_window(cls, v):
        parts = [part.strip() for part in v.split("-")]
        if len(parts) != 2:
            raise ValueError(f"Time window '{v}' must look like '10:00 AM - 11:00 AM'")
        try:
            start = datetime.strptime(parts[0], "%I:%M %p").time()
            end = datetime.strptime(parts[1], "%I:%M %p").time()
        except ValueError as e:
            raise ValueError(f"Time window '{v}' must look like '10:00 AM - 11:00 AM'") from e
        if end <= start:
            raise ValueError(f"Time window '{v}' ends before it starts")
        return f"{parts[0]} - {parts[1]}"

    @property
    def start_time(self) -> time:
        return datetime.strptime(self.window.split("-")[0].strip(), "%I:%M %p").time()

    @property
    def end_time(self) -> time:
        return datetime.strptime(self.window.split("-")[1].strip(), "%I:%M %p").time()

    def starts_at(self, tzinfo=None) -> datetime:
        return datetime.combine(self.pickup_date, self.start_time, tzinfo=tzinfo)


class ReservationStatus(str, Enum):
    """Reservation lifecycle state"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class Reservation(BaseModel):
    """Reservation of a seller's plant for pickup or delivery"""
    id: Optional[str] = Field(None, description="Reservation ID, assigned on confirmation")
    plant_key: str = Field(..., description="Reserved plant key")
    offer: SellerOffer = Field(..., description="Seller offer the reservation is held against")
    mode: FulfillmentMode = Field(..., description="Pickup or delivery")
    status: ReservationStatus = Field(ReservationStatus.PENDING, description="Lifecycle state")
    quantity: int = Field(1, ge=1, le=1, description="Units reserved (one plant per reservation)")
    contact: Optional[ContactInfo] = None
    slot: Optional[TimeSlot] = Field(None, description="Pickup slot (pickup mode only)")
    payment_method: str = Field("cash", description="cash or online")
    created_at: Optional[datetime] = Field(None, description="Confirmation timestamp")
    expires_at: Optional[datetime] = Field(None, description="End of the pickup hold (pickup mode only)")


class ReservationErrorKind(str, Enum):
    """Classified reason a reservation operation was refused"""
    OUT_OF_STOCK = "out_of_stock"
    DELIVERY_RANGE_EXCEEDED = "delivery_range_exceeded"
    VALIDATION_ERROR = "validation_error"
    INVALID_STATE = "invalid_state"


class ReservationConfirmedEvent(BaseModel):
    """Emitted once a reservation is confirmed, for persistence and notification"""
    event_type: str = "reservation.confirmed"
    reservation: Reservation
    occurred_at: datetime


class ReservationResult(BaseModel):
    """Outcome of a reservation operation"""
    success: bool = Field(..., description="Whether the operation succeeded")
    reservation: Optional[Reservation] = Field(None, description="Resulting reservation on success")
    error: Optional[ReservationErrorKind] = Field(None, description="Failure kind on refusal")
    message: str = Field("", description="Explanation suitable for logs or the host UI")
    event: Optional[ReservationConfirmedEvent] = Field(None, description="Confirmation event, if one was emitted")


class Coordinates(BaseModel):
    """Latitude/longitude pair"""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    display_name: Optional[str] = None
