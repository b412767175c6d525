from ehotel.models.customer import Customer
from ehotel.models.employee import Employee
from ehotel.models.hotel_chain import (
    HotelChain,
    EmailsHotelChain,
    PhoneNumberHotelChain,
    OfficeAddressHotelChain,
)
from ehotel.models.hotel import Hotel, PhoneNumberHotel
from ehotel.models.room import Room, Commodity, Problem, RoomCommodity, RoomProblem
from ehotel.models.booking import Booking, BookingArchive
from ehotel.models.rental import Rental, RentalArchive
from ehotel.models.payment import Payment

__all__ = [
    "Customer",
    "Employee",
    "HotelChain",
    "EmailsHotelChain",
    "PhoneNumberHotelChain",
    "OfficeAddressHotelChain",
    "Hotel",
    "PhoneNumberHotel",
    "Room",
    "Commodity",
    "Problem",
    "RoomCommodity",
    "RoomProblem",
    "Booking",
    "BookingArchive",
    "Rental",
    "RentalArchive",
    "Payment",
]
