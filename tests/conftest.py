import pytest
from datetime import datetime, timezone

from plant_match_models import (
    AnswerOption,
    QuizQuestion,
    QuizConfig,
    ExpertSignal,
    PlantProfile,
    SellerOffer,
    ContactInfo,
    TimeSlot,
    Reservation,
)


@pytest.fixture
def small_catalog():
    return [
        PlantProfile(key="succulent", name="Succulent Collection", difficulty=1, price=399.0),
        PlantProfile(key="snake", name="Snake Plant", difficulty=1, price=799.0),
        PlantProfile(key="monstera", name="Monstera Deliciosa", difficulty=3, price=999.0),
        PlantProfile(key="orchid", name="Orchid", difficulty=5, price=1599.0),
    ]


@pytest.fixture
def small_quiz_config(small_catalog):
    return QuizConfig(
        questions=[
            QuizQuestion(
                id="lifestyle",
                prompt="How would you describe your lifestyle?",
                options=[
                    AnswerOption(value="busy", points={"succulent": 3, "snake": 3}),
                    AnswerOption(value="routine", points={"monstera": 2, "orchid": 3}),
                ],
            ),
            QuizQuestion(
                id="light",
                prompt="How much light?",
                options=[
                    AnswerOption(value="direct", points={"succulent": 1}),
                    AnswerOption(value="medium", points={"monstera": 2}),
                    AnswerOption(value="none", points={}),
                ],
            ),
            QuizQuestion(
                id="experience",
                prompt="Experience?",
                options=[
                    AnswerOption(value="beginner", points={}),
                    AnswerOption(value="expert", points={}),
                ],
            ),
        ],
        catalog=small_catalog,
        expert_signal=ExpertSignal(question_id="experience", option_value="expert"),
    )


@pytest.fixture
def near_offer():
    return SellerOffer(
        seller_id="s1",
        seller_name="Green Thumb Nursery",
        plant_key="monstera",
        distance_km=2.3,
        price=899.0,
        stock=8,
        delivery_time="2-3 hours",
    )


@pytest.fixture
def far_offer():
    return SellerOffer(
        seller_id="s3",
        seller_name="Urban Jungle Co.",
        plant_key="monstera",
        distance_km=20.0,
        price=749.0,
        stock=5,
        delivery_time="Pickup only",
    )


@pytest.fixture
def contact():
    return ContactInfo(name="Asha Rao", phone="+91-9876543210", email="asha@example.com")


@pytest.fixture
def t0():
    return datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def pickup_slot():
    return TimeSlot(pickup_date="2024-01-02", window="10:00 AM - 11:00 AM")


@pytest.fixture
def pending_pickup(near_offer):
    return Reservation(plant_key="monstera", offer=near_offer, mode="pickup")


@pytest.fixture
def pending_delivery(near_offer):
    return Reservation(plant_key="monstera", offer=near_offer, mode="delivery")


@pytest.fixture
def mock_storage():
    class MockStorage:
        def __init__(self):
            self.reservations = {}

        def create_reservation(self, reservation: Reservation):
            self.reservations[reservation.id] = reservation
            return reservation

        def get_reservation(self, reservation_id):
            return self.reservations.get(str(reservation_id))

        def get_reservations_for_seller(self, seller_id):
            return [
                r for r in self.reservations.values() if r.offer.seller_id == str(seller_id)
            ]

        def get_reservations_for_phone(self, phone):
            return [
                r for r in self.reservations.values() if r.contact and r.contact.phone == phone
            ]

    return MockStorage()
