"""
Firebase Firestore storage for confirmed plant reservations
"""
from typing import List, Dict, Optional
import json
import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from plant_match_models import Reservation, ReservationStatus
from config import FIREBASE_CREDENTIALS_PATH, FIREBASE_CREDENTIALS_JSON, RESERVATIONS_COLLECTION

logger = logging.getLogger(__name__)


def _initialize_firebase():
    """Initialize Firebase Admin SDK"""
    # Check if Firebase is already initialized
    try:
        firebase_admin.get_app()
        logger.info("Firebase already initialized")
        return firestore.client()
    except ValueError:
        pass

    # Option 1: service account JSON file
    if FIREBASE_CREDENTIALS_PATH and os.path.exists(FIREBASE_CREDENTIALS_PATH):
        cred = credentials.Certificate(FIREBASE_CREDENTIALS_PATH)
        firebase_admin.initialize_app(cred)
        logger.info(f"Firebase initialized with credentials from {FIREBASE_CREDENTIALS_PATH}")
    # Option 2: JSON string in the environment
    elif FIREBASE_CREDENTIALS_JSON:
        cred = credentials.Certificate(json.loads(FIREBASE_CREDENTIALS_JSON))
        firebase_admin.initialize_app(cred)
        logger.info("Firebase initialized with credentials from environment variable")
    # Option 3: default credentials (Google Cloud environments)
    else:
        try:
            firebase_admin.initialize_app()
            logger.info("Firebase initialized with default credentials")
        except Exception as e:
            logger.error(f"Failed to initialize Firebase: {e}")
            raise RuntimeError(
                "Firebase initialization failed. Please set FIREBASE_CREDENTIALS_PATH "
                "or FIREBASE_CREDENTIALS_JSON environment variable, or use default credentials."
            ) from e

    return firestore.client()


class ReservationStorage:
    """Firebase Firestore storage for confirmed reservations"""

    def __init__(self, db=None):
        self.db = db if db is not None else _initialize_firebase()
        self.reservations_collection = self.db.collection(RESERVATIONS_COLLECTION)
        logger.info("ReservationStorage initialized with Firebase Firestore")

    def _reservation_to_dict(self, reservation: Reservation) -> Dict:
        """Convert Reservation model to a Firestore-compatible dictionary"""
        data = reservation.model_dump(mode="json", exclude={'id'}, exclude_none=True)
        # Flattened copies for where() queries
        data['seller_id'] = reservation.offer.seller_id
        if reservation.contact is not None:
            data['contact_phone'] = reservation.contact.phone
        return data

    def _dict_to_reservation(self, doc_id: str, data: Dict) -> Reservation:
        """Convert Firestore document to Reservation model"""
        data = dict(data)
        data.pop('seller_id', None)
        data.pop('contact_phone', None)
        data['id'] = doc_id
        return Reservation(**data)

    def create_reservation(self, reservation: Reservation) -> Reservation:
        """Store a confirmed reservation under its own id"""
        if reservation.status != ReservationStatus.CONFIRMED or not reservation.id:
            raise ValueError("Only confirmed reservations with an id can be stored")
        try:
            self.reservations_collection.document(reservation.id).set(self._reservation_to_dict(reservation))
        except Exception as e:
            logger.error(f"Error storing reservation {reservation.id}: {e}")
            raise
        logger.info(f"Stored reservation {reservation.id} for seller {reservation.offer.seller_id} in Firebase")
        return reservation

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        """Get a reservation by ID from Firestore"""
        try:
            doc = self.reservations_collection.document(str(reservation_id)).get()
            if doc.exists:
                return self._dict_to_reservation(doc.id, doc.to_dict())
            return None
        except Exception as e:
            logger.error(f"Error getting reservation {reservation_id}: {e}")
            return None

    def _query(self, field: str, value: str) -> List[Reservation]:
        try:
            return [
                self._dict_to_reservation(doc.id, doc.to_dict())
                for doc in self.reservations_collection.where(field, '==', value).stream()
            ]
        except Exception as e:
            logger.error(f"Error querying reservations by {field}={value}: {e}")
            return []

    def get_reservations_for_seller(self, seller_id: str) -> List[Reservation]:
        """All reservations held against a seller's offers"""
        return self._query('seller_id', str(seller_id))

    def get_reservations_for_phone(self, phone: str) -> List[Reservation]:
        """All reservations made with a contact phone number"""
        return self._query('contact_phone', phone)


_storage: Optional[ReservationStorage] = None


def get_storage() -> ReservationStorage:
    """Process-wide storage instance, created on first use"""
    global _storage
    if _storage is None:
        _storage = ReservationStorage()
    return _storage


def set_storage(storage) -> None:
    """Replace the process-wide storage (used by hosts and tests)"""
    global _storage
    _storage = storage
