import pytest
from datetime import date

from plant_match_models import (
    AnswerOption,
    FulfillmentMode,
    PlantProfile,
    QuizResponse,
    Reservation,
    ReservationStatus,
    SellerOffer,
    TimeSlot,
)


def test_answer_option_defaults():
    option = AnswerOption(value="busy")
    assert option.points == {}
    assert option.text == ""


def test_quiz_response_with_answer_does_not_mutate():
    first = QuizResponse().with_answer("lifestyle", AnswerOption(value="busy", points={"snake": 3}))
    second = first.with_answer("lifestyle", AnswerOption(value="routine", points={"orchid": 3}))
    assert first.answers["lifestyle"].value == "busy"
    assert second.answers["lifestyle"].value == "routine"
    assert len(second.answers) == 1


def test_plant_profile_difficulty_range():
    with pytest.raises(ValueError):
        PlantProfile(key="x", name="X", difficulty=6, price=10.0)
    with pytest.raises(ValueError):
        PlantProfile(key="x", name="X", difficulty=0, price=10.0)


def test_seller_offer_rejects_negative_stock_and_distance():
    with pytest.raises(ValueError):
        SellerOffer(seller_id="s", plant_key="snake", distance_km=1, price=1, stock=-1)
    with pytest.raises(ValueError):
        SellerOffer(seller_id="s", plant_key="snake", distance_km=-1, price=1, stock=1)


def test_reservation_defaults(near_offer):
    reservation = Reservation(plant_key="monstera", offer=near_offer, mode="delivery")
    assert reservation.status == ReservationStatus.PENDING
    assert reservation.mode == FulfillmentMode.DELIVERY
    assert reservation.quantity == 1
    assert reservation.payment_method == "cash"


def test_time_slot_normalizes_spacing():
    slot = TimeSlot(pickup_date=date(2024, 1, 1), window="10:00 AM-11:00 AM")
    assert slot.window == "10:00 AM - 11:00 AM"


def test_reservation_quantity_fixed_at_one(near_offer):
    with pytest.raises(ValueError):
        Reservation(plant_key="monstera", offer=near_offer, mode="pickup", quantity=2)
    with pytest.raises(ValueError):
        Reservation(plant_key="monstera", offer=near_offer, mode="pickup", quantity=0)
