"""
Demo script for the Plant Match quiz and reservation module
"""
from datetime import datetime, timedelta, timezone
from plant_match_models import SellerOffer, ContactInfo, FulfillmentMode
from plant_match_logic import PlantMatchEngine
from plant_match_reservations import (
    rank_offers_by_distance, check_delivery_eligible, is_low_stock,
    available_pickup_slots, begin_reservation, confirm_reservation,
    is_expired, reservation_state
)


def demo_quiz():
    """Demo: Plant personality quiz"""
    print("=" * 60)
    print("DEMO 1: Plant Personality Quiz")
    print("=" * 60)

    engine = PlantMatchEngine()
    answers = {
        "lifestyle": "busy",
        "space": "small",
        "light": "direct",
        "experience": "beginner",
        "watering": "forget",
        "purpose": "easy",
    }

    print("\nAnswers:")
    for question in engine.questions:
        option = engine.get_option(question.id, answers[question.id])
        print(f"  {question.prompt} -> {option.text}")

    recommendations = engine.score(engine.build_response(answers))

    print(f"\nFound {len(recommendations)} matching plants:")
    for i, rec in enumerate(recommendations, 1):
        print(f"\n{i}. {rec.profile.name} - {rec.profile.subtitle}")
        print(f"   Match: {rec.match_percentage}% (score {rec.score})")
        print(f"   Difficulty: {rec.profile.difficulty}/5")
        print(f"   Price: ₹{rec.profile.price:.0f}")

    return recommendations[0].profile.key


def demo_sellers(plant_key: str):
    """Demo: Nearby sellers for the primary recommendation"""
    print("\n" + "=" * 60)
    print("DEMO 2: Local Sellers")
    print("=" * 60)

    offers = [
        SellerOffer(seller_id="s3", seller_name="Urban Jungle Co.", plant_key=plant_key,
                    distance_km=18.8, price=749, stock=12, delivery_time="Pickup only"),
        SellerOffer(seller_id="s1", seller_name="Green Thumb Nursery", plant_key=plant_key,
                    distance_km=2.3, price=899, stock=8, delivery_time="2-3 hours"),
        SellerOffer(seller_id="s2", seller_name="The Plant Corner", plant_key=plant_key,
                    distance_km=12.1, price=849, stock=3, delivery_time="3-4 hours"),
    ]

    ranked = rank_offers_by_distance(offers)
    for offer in ranked:
        delivery = "delivery + pickup" if check_delivery_eligible(offer) else "pickup only"
        stock_note = " (only a few left!)" if is_low_stock(offer) else ""
        print(f"\n  {offer.seller_name}: {offer.distance_km} km, ₹{offer.price:.0f}, {delivery}")
        print(f"   Stock: {offer.stock}{stock_note}")

    return ranked[-1]


def demo_reservation(plant_key: str, offer: SellerOffer):
    """Demo: Pickup reservation lifecycle"""
    print("\n" + "=" * 60)
    print("DEMO 3: Pickup Reservation")
    print("=" * 60)

    delivery_attempt = begin_reservation(plant_key, offer, FulfillmentMode.DELIVERY)
    print(f"\nDelivery from {offer.seller_name}: {delivery_attempt.message}")

    now = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    staged = begin_reservation(plant_key, offer, FulfillmentMode.PICKUP)
    slot = available_pickup_slots(now.date())[1]
    result = confirm_reservation(
        staged.reservation,
        ContactInfo(name="Asha Rao", phone="+91-9876543210"),
        slot,
        now=now,
    )
    reservation = result.reservation

    print(f"\nReservation {reservation.id}:")
    print(f"  Pickup: {slot.pickup_date.isoformat()} {slot.window}")
    print(f"  Held until: {reservation.expires_at.isoformat()}")

    for hours in (47, 49):
        at = now + timedelta(hours=hours)
        print(f"  After {hours}h: {reservation_state(reservation, at).value} "
              f"(expired={is_expired(reservation, at)})")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Plant Match - Demo")
    print("=" * 60)

    primary = demo_quiz()
    far_offer = demo_sellers(primary)
    demo_reservation(primary, far_offer)

    print("\n" + "=" * 60)
    print("Demo completed!")
    print("=" * 60)
