"""
预订服务 - 预订生命周期
创建时校验房间可用与日期冲突；状态变更时联动房间状态。
预订写入与房间状态写入在同一事务内提交。
"""
import re
import logging
from datetime import date
from typing import Callable, List, Optional, Union
from sqlalchemy.orm import Session, joinedload
from hotel_api.models.entities import (
    Booking, BookingStatus, BookingSource, Room, RoomStatus, User
)
from hotel_api.models.events import (
    EventType, BookingCreatedData, BookingStatusChangedData, RoomStatusChangedData
)
from hotel_api.models.schemas import BookingCreate, BookingUpdate
from hotel_api.services.errors import NotFoundError
from hotel_api.services.event_bus import event_bus, make_event, Event
from hotel_api.services.filters import booking_filters, room_conflict_filters

logger = logging.getLogger(__name__)

# "101 - Standard (₹1500/night)" -> "101"
ROOM_NUMBER_PREFIX = re.compile(r"^\s*(\d+)")


def room_status_after(booking_status: BookingStatus,
                      current_room_status: RoomStatus) -> Optional[RoomStatus]:
    """预订进入新状态后房间应处的状态，None 表示不变"""
    if booking_status == BookingStatus.CHECKED_IN:
        return RoomStatus.OCCUPIED
    if booking_status == BookingStatus.CHECKED_OUT:
        return RoomStatus.CLEANING
    if booking_status == BookingStatus.CANCELLED and current_room_status == RoomStatus.OCCUPIED:
        return RoomStatus.AVAILABLE
    return None


class BookingService:
    """预订服务"""

    def __init__(self, db: Session, event_publisher: Callable[[Event], None] = None):
        self.db = db
        # 支持依赖注入事件发布器，便于测试
        self._publish_event = event_publisher or event_bus.publish

    # ============== 查询 ==============

    def get_bookings(self, status: Optional[BookingStatus] = None,
                     guest_id: Optional[int] = None,
                     room_id: Optional[int] = None,
                     from_date: Optional[date] = None,
                     to_date: Optional[date] = None) -> List[Booking]:
        """获取预订列表，按入住日期倒序"""
        criteria = booking_filters(status, guest_id, room_id, from_date, to_date)
        return self.db.query(Booking).options(
            joinedload(Booking.room), joinedload(Booking.guest)
        ).filter(*criteria).order_by(Booking.check_in.desc()).all()

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """获取单个预订"""
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def find_conflicts(self, room_id: int, check_in: date, check_out: date) -> List[Booking]:
        """同一房间仍有效且日期重叠的预订"""
        return self.db.query(Booking).filter(
            *room_conflict_filters(room_id, check_in, check_out)
        ).all()

    def resolve_room(self, room_ref: Union[int, str]) -> Room:
        """
        解析预订请求中的 roomId

        整数（或纯数字字符串）按主键查找；其他字符串视为前端误传的
        展示文本，取开头的数字作为房间号查找。
        """
        if isinstance(room_ref, int) or str(room_ref).strip().isdigit():
            room = self.db.query(Room).filter(Room.id == int(room_ref)).first()
            if not room:
                raise NotFoundError("Room not found")
            return room

        logger.warning(f"Invalid room ID format received: {room_ref!r}. Attempting to recover.")
        match = ROOM_NUMBER_PREFIX.match(str(room_ref))
        if not match:
            raise ValueError(f"Invalid room ID format: {room_ref}")

        room_number = match.group(1)
        room = self.db.query(Room).filter(Room.room_number == room_number).first()
        if not room:
            raise ValueError(f"Room not found with number: {room_number}")

        logger.info(f"Recovered room {room_number} (id={room.id}) from display text")
        return room

    # ============== 生命周期 ==============

    def create_booking(self, data: BookingCreate) -> Booking:
        """创建预订"""
        room = self.resolve_room(data.room_id)

        if data.check_out <= data.check_in:
            raise ValueError("Check-out date must be after check-in date")

        guest = self.db.query(User).filter(User.id == data.guest_id).first()
        if not guest:
            raise NotFoundError("Guest not found")

        if room.status != RoomStatus.AVAILABLE:
            raise ValueError("Room is not available for booking")

        if self.find_conflicts(room.id, data.check_in, data.check_out):
            raise ValueError("Room is already booked for the selected dates")

        booking = Booking(
            room_id=room.id,
            guest_id=guest.id,
            check_in=data.check_in,
            check_out=data.check_out,
            number_of_guests=data.number_of_guests,
            total_price=data.total_price,
            special_requests=data.special_requests,
            booking_source=data.booking_source or BookingSource.DIRECT_WEBSITE,
        )
        self.db.add(booking)

        # 当天或已过入住日的预订立即占用房间
        old_room_status = room.status
        if data.check_in <= date.today():
            room.status = RoomStatus.OCCUPIED

        self.db.commit()
        self.db.refresh(booking)
        logger.info(f"Booking {booking.id} created for room {room.room_number}")

        self._publish_event(make_event(
            EventType.BOOKING_CREATED,
            BookingCreatedData(
                booking_id=booking.id,
                room_id=room.id,
                room_number=room.room_number,
                guest_id=guest.id,
                check_in=booking.check_in.isoformat(),
                check_out=booking.check_out.isoformat(),
                total_price=booking.total_price,
            ),
            source="booking_service",
        ))
        if room.status != old_room_status:
            self._publish_room_status(room, old_room_status, f"booking {booking.id} created")

        return booking

    def update_booking(self, booking_id: int, data: BookingUpdate) -> Booking:
        """更新预订；状态变化时按固定映射联动房间状态"""
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")

        update_data = {
            key: value for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }

        check_in = update_data.get('check_in', booking.check_in)
        check_out = update_data.get('check_out', booking.check_out)
        if check_out <= check_in:
            raise ValueError("Check-out date must be after check-in date")

        old_status = booking.status
        new_status = update_data.get('status')
        room = booking.room
        old_room_status = room.status if room else None

        if new_status and new_status != old_status and room is not None:
            target = room_status_after(new_status, room.status)
            if target is not None:
                room.status = target

        for key, value in update_data.items():
            setattr(booking, key, value)

        self.db.commit()
        self.db.refresh(booking)

        if new_status and new_status != old_status:
            logger.info(f"Booking {booking.id} status {old_status.value} -> {new_status.value}")
            self._publish_event(make_event(
                EventType.BOOKING_STATUS_CHANGED,
                BookingStatusChangedData(
                    booking_id=booking.id,
                    room_id=booking.room_id,
                    old_status=old_status.value,
                    new_status=new_status.value,
                ),
                source="booking_service",
            ))
        if room is not None and room.status != old_room_status:
            self._publish_room_status(room, old_room_status, f"booking {booking.id} {new_status.value}")

        return booking

    def delete_booking(self, booking_id: int) -> None:
        """删除预订，房间状态保持不变"""
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")

        self.db.delete(booking)
        self.db.commit()
        logger.info(f"Booking {booking_id} removed")

    def _publish_room_status(self, room: Room, old_status: RoomStatus, reason: str) -> None:
        self._publish_event(make_event(
            EventType.ROOM_STATUS_CHANGED,
            RoomStatusChangedData(
                room_id=room.id,
                room_number=room.room_number,
                old_status=old_status.value,
                new_status=room.status.value,
                reason=reason,
            ),
            source="booking_service",
        ))

    # ============== 响应投影 ==============

    def get_booking_detail(self, booking: Booking) -> dict:
        """预订详情（附带房间、客人摘要）"""
        room = booking.room
        guest = booking.guest
        return {
            'id': booking.id,
            'room_id': booking.room_id,
            'guest_id': booking.guest_id,
            'check_in': booking.check_in,
            'check_out': booking.check_out,
            'number_of_guests': booking.number_of_guests,
            'status': booking.status,
            'total_price': booking.total_price,
            'payment_status': booking.payment_status,
            'special_requests': booking.special_requests,
            'booking_source': booking.booking_source,
            'created_at': booking.created_at,
            'updated_at': booking.updated_at,
            'room': {
                'id': room.id,
                'room_number': room.room_number,
                'type': room.type,
                'base_price': room.base_price,
                'status': room.status,
            } if room else None,
            'guest': {
                'id': guest.id,
                'username': guest.username,
                'full_name': guest.full_name,
                'email': guest.email,
                'phone': guest.phone,
            } if guest else None,
            'guest_name': guest.display_name if guest else None,
            'phone': guest.phone if guest else None,
        }
