from .hotel_factory import HotelDetails as HotelDetails
from .hotel_factory import HotelFactory as HotelFactory
