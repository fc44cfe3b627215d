from .hotel_service import HotelService as HotelService
