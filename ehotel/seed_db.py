"""
Load the hotel-chain reference data.

Hotel chains are read-only through the API, so they are created here:

    python -m ehotel.seed_db
"""
from sqlalchemy.orm import Session

from ehotel.db import SessionLocal, init_database
from ehotel.models.hotel_chain import (
    EmailsHotelChain,
    HotelChain,
    OfficeAddressHotelChain,
    PhoneNumberHotelChain,
)
from ehotel.utils.logging_utils import setup_logger

logger = setup_logger(__name__)


HOTEL_CHAINS = [
    {
        "name": "Maple Leaf Hotels",
        "hotels_number": 8,
        "emails": ["contact@mapleleafhotels.ca", "booking@mapleleafhotels.ca"],
        "phone_numbers": ["613-555-0101"],
        "office": (120, "Rideau Street", "Ottawa", "K1N 5Y1", "Canada"),
    },
    {
        "name": "Northern Lights Inns",
        "hotels_number": 8,
        "emails": ["info@northernlightsinns.ca"],
        "phone_numbers": ["780-555-0142", "780-555-0143"],
        "office": (45, "Jasper Avenue", "Edmonton", "T5J 3N4", "Canada"),
    },
    {
        "name": "Harbour Suites",
        "hotels_number": 8,
        "emails": ["hello@harboursuites.ca"],
        "phone_numbers": ["902-555-0180"],
        "office": (9, "Lower Water Street", "Halifax", "B3J 1R7", "Canada"),
    },
    {
        "name": "Prairie Rest",
        "hotels_number": 8,
        "emails": ["stay@prairierest.ca"],
        "phone_numbers": ["306-555-0119"],
        "office": (300, "Albert Street", "Regina", "S4R 2N7", "Canada"),
    },
    {
        "name": "Laurentian Lodges",
        "hotels_number": 8,
        "emails": ["reservations@laurentianlodges.ca"],
        "phone_numbers": ["514-555-0177"],
        "office": (1500, "Rue Sherbrooke", "Montreal", "H3G 1L3", "Canada"),
    },
]


def seed_hotel_chains(db: Session) -> int:
    """Insert the default chains when the table is empty. Returns how many were added."""
    if db.query(HotelChain).first() is not None:
        logger.info("Hotel chains already present, skipping seed")
        return 0

    try:
        for entry in HOTEL_CHAINS:
            chain = HotelChain(name=entry["name"], hotels_number=entry["hotels_number"])
            db.add(chain)
            db.flush()

            db.add_all(EmailsHotelChain(email=email, hotel_chain_id=chain.id) for email in entry["emails"])
            db.add_all(
                PhoneNumberHotelChain(phone_number=number, hotel_chain_id=chain.id)
                for number in entry["phone_numbers"]
            )
            street_number, street_name, city, postal_code, country = entry["office"]
            db.add(
                OfficeAddressHotelChain(
                    street_number=street_number,
                    street_name=street_name,
                    city=city,
                    postal_code=postal_code,
                    country=country,
                    hotel_chain_id=chain.id,
                )
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Seeded {len(HOTEL_CHAINS)} hotel chains")
    return len(HOTEL_CHAINS)


def seed_db():
    init_database()
    db = SessionLocal()
    try:
        seed_hotel_chains(db)
    finally:
        db.close()


if __name__ == "__main__":
    seed_db()
