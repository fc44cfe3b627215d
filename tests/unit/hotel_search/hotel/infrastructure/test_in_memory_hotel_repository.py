from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from threading import Event

import pytest

from hotel_search.hotel.domain.value_object.geo_location import GeoLocation
from hotel_search.hotel.domain.value_object.hotel_id import HotelId
from hotel_search.hotel.domain.value_object.hotel_name import HotelName
from hotel_search.hotel.infrastructure.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.shared.domain.exception import (
    DuplicateResourceException,
    OperationCancelledException,
    ResourceNotFoundException,
)


class TestInMemoryHotelRepository:
    @pytest.fixture
    def repository(self):
        return InMemoryHotelRepository()

    def test_add_and_find_by_id(self, repository, create_hotel):
        hotel = create_hotel()
        repository.add(hotel)

        found = repository.find_by_id(hotel.id)

        assert found == hotel
        assert found.name == hotel.name
        assert found.price == hotel.price
        assert found.location == hotel.location

    def test_find_by_id_missing_returns_none(self, repository):
        assert repository.find_by_id(HotelId.generate()) is None

    def test_add_same_id_twice_raises_error(self, repository, create_hotel):
        hotel = create_hotel()
        repository.add(hotel)

        with pytest.raises(DuplicateResourceException):
            repository.add(hotel)

    def test_unsaved_changes_are_not_visible(self, repository, create_hotel):
        hotel = create_hotel(name="Original")
        repository.add(hotel)

        hotel.update(HotelName(value="Changed"), Decimal("1"), hotel.location)

        assert repository.find_by_id(hotel.id).name == HotelName(value="Original")

    def test_update_replaces_stored_hotel(self, repository, create_hotel):
        hotel = create_hotel(name="Original")
        repository.add(hotel)
        hotel.update(HotelName(value="Changed"), Decimal("1"), hotel.location)

        repository.update(hotel)

        stored = repository.find_by_id(hotel.id)
        assert stored.name == HotelName(value="Changed")
        assert stored.updated_at == hotel.updated_at

    def test_update_missing_hotel_raises_not_found(self, repository, create_hotel):
        with pytest.raises(ResourceNotFoundException):
            repository.update(create_hotel())

    def test_delete_removes_hotel(self, repository, create_hotel):
        hotel = create_hotel()
        repository.add(hotel)

        repository.delete(hotel.id)

        assert not repository.exists(hotel.id)
        assert repository.find_by_id(hotel.id) is None

    def test_delete_missing_is_noop(self, repository):
        repository.delete(HotelId.generate())

    def test_find_all(self, repository, create_hotel):
        hotels = [create_hotel(name=f"H{i}") for i in range(3)]
        for hotel in hotels:
            repository.add(hotel)

        assert set(repository.find_all()) == set(hotels)

    def test_exists(self, repository, create_hotel):
        hotel = create_hotel()
        assert not repository.exists(hotel.id)
        repository.add(hotel)
        assert repository.exists(hotel.id)

    def test_exists_by_name_and_location_ignores_case(self, repository, create_hotel):
        repository.add(create_hotel(name="Grand Hotel", latitude=45.815, longitude=15.9819))

        assert repository.exists_by_name_and_location("GRAND HOTEL", 45.815, 15.9819)

    def test_exists_by_name_and_location_uses_tolerance(self, repository, create_hotel):
        repository.add(create_hotel(name="Grand Hotel", latitude=45.815, longitude=15.9819))

        assert repository.exists_by_name_and_location(
            "Grand Hotel", 45.81500009, 15.98190009
        )
        assert not repository.exists_by_name_and_location(
            "Grand Hotel", 45.8151, 15.9819
        )

    def test_exists_by_name_and_location_different_name(self, repository, create_hotel):
        repository.add(create_hotel(name="Grand Hotel"))

        assert not repository.exists_by_name_and_location("Other", 45.8150, 15.9819)

    def test_exists_by_name_and_location_excludes_id(self, repository, create_hotel):
        hotel = create_hotel(name="Grand Hotel")
        repository.add(hotel)

        assert not repository.exists_by_name_and_location(
            "Grand Hotel", 45.8150, 15.9819, exclude_id=hotel.id
        )

    def test_cancelled_find_all_raises(self, repository):
        event = Event()
        event.set()

        with pytest.raises(OperationCancelledException):
            repository.find_all(cancel_event=event)

    def test_concurrent_adds_are_all_stored(self, repository, create_hotel):
        hotels = [
            create_hotel(name=f"H{i}", latitude=0.0, longitude=i * 0.001)
            for i in range(200)
        ]

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(repository.add, hotels))

        assert len(repository.find_all()) == 200

    def test_concurrent_adds_of_same_id_store_once(self, repository, create_hotel):
        hotel = create_hotel()

        def _add(_):
            try:
                repository.add(hotel)
                return True
            except DuplicateResourceException:
                return False

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(_add, range(50)))

        assert results.count(True) == 1
        assert len(repository.find_all()) == 1
        assert repository.find_by_id(hotel.id).location == GeoLocation(45.8150, 15.9819)
