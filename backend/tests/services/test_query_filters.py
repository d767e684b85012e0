"""
查询过滤层测试
"""
import pytest
from datetime import date

from hotel_api.models.entities import (
    Booking, BookingStatus, Room, RoomType, RoomStatus, User, UserRole
)
from hotel_api.services.filters import (
    booking_filters, room_conflict_filters, room_filters, user_filters
)


@pytest.fixture
def bookings(db_session):
    """同一房间的三段预订：6/1-6/3，6/10-6/12（已取消），6/20-6/25"""
    room = Room(room_number="101", type=RoomType.STANDARD, base_price=1000,
                weekend_price=1200, holiday_price=1500)
    guest = User(username="g", email="g@example.com", password_hash="x", role=UserRole.GUEST)
    db_session.add_all([room, guest])
    db_session.flush()

    rows = [
        Booking(room_id=room.id, guest_id=guest.id, check_in=date(2024, 6, 1),
                check_out=date(2024, 6, 3), total_price=100),
        Booking(room_id=room.id, guest_id=guest.id, check_in=date(2024, 6, 10),
                check_out=date(2024, 6, 12), total_price=100, status=BookingStatus.CANCELLED),
        Booking(room_id=room.id, guest_id=guest.id, check_in=date(2024, 6, 20),
                check_out=date(2024, 6, 25), total_price=100),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return room, rows


def _check_ins(db, criteria):
    return sorted(b.check_in.day for b in db.query(Booking).filter(*criteria).all())


class TestBookingFilters:
    """预订日期过滤"""

    def test_range_uses_overlap(self, db_session, bookings):
        assert _check_ins(db_session, booking_filters(
            from_date=date(2024, 6, 2), to_date=date(2024, 6, 11)
        )) == [1, 10]

    def test_range_inside_booking(self, db_session, bookings):
        """查询区间被预订完全覆盖"""
        assert _check_ins(db_session, booking_filters(
            from_date=date(2024, 6, 21), to_date=date(2024, 6, 22)
        )) == [20]

    def test_from_only(self, db_session, bookings):
        assert _check_ins(db_session, booking_filters(from_date=date(2024, 6, 11))) == [10, 20]

    def test_to_only(self, db_session, bookings):
        assert _check_ins(db_session, booking_filters(to_date=date(2024, 6, 10))) == [1, 10]

    def test_status(self, db_session, bookings):
        assert _check_ins(db_session, booking_filters(status=BookingStatus.CANCELLED)) == [10]

    def test_no_criteria(self):
        assert booking_filters() == []


class TestRoomConflictFilters:
    """房间冲突查询"""

    def test_cancelled_bookings_ignored(self, db_session, bookings):
        room, _ = bookings
        assert _check_ins(db_session, room_conflict_filters(
            room.id, date(2024, 6, 9), date(2024, 6, 13)
        )) == []

    def test_boundary_day_conflicts(self, db_session, bookings):
        room, _ = bookings
        assert _check_ins(db_session, room_conflict_filters(
            room.id, date(2024, 6, 3), date(2024, 6, 5)
        )) == [1]


class TestSimpleFilters:
    """房间与用户过滤"""

    def test_room_filters_count(self):
        assert room_filters() == []
        assert len(room_filters(RoomType.SUITE, RoomStatus.AVAILABLE, 100, 200)) == 4

    def test_user_filters(self):
        assert user_filters() == []
        assert len(user_filters(UserRole.ADMIN)) == 1
