from .entity import Hotel as Hotel
from .factory import HotelDetails as HotelDetails
from .factory import HotelFactory as HotelFactory
from .repository import HotelRepository as HotelRepository
from .service import SearchRanker as SearchRanker
from .value_object import GeoLocation as GeoLocation
from .value_object import HotelId as HotelId
from .value_object import HotelName as HotelName
from .value_object import HotelSearchResult as HotelSearchResult
from .value_object import SearchQuery as SearchQuery
