from .hotel_repository import HotelRepository as HotelRepository
from .hotel_repository import is_same_hotel as is_same_hotel
