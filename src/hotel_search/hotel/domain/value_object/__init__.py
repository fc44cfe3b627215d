from .geo_location import GeoLocation as GeoLocation
from .hotel_id import HotelId as HotelId
from .hotel_name import HotelName as HotelName
from .hotel_search_result import HotelSearchResult as HotelSearchResult
from .search_query import SearchQuery as SearchQuery
