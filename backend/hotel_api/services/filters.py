"""
查询过滤层
把可选的查询参数翻译成 SQLAlchemy 条件列表，调用方用 AND 组合
"""
from datetime import date
from typing import List, Optional
from sqlalchemy import and_, or_
from hotel_api.models.entities import (
    Room, RoomType, RoomStatus, Booking, BookingStatus,
    ServiceRequest, ServiceType, ServiceStatus, User, UserRole,
    MaintenanceTask, MaintenanceStatus, MaintenancePriority
)

# 这两种状态的预订不再占用房间
INACTIVE_BOOKING_STATUSES = (BookingStatus.CANCELLED, BookingStatus.CHECKED_OUT)


def date_overlap_clause(start: date, end: date):
    """
    预订区间与 [start, end] 重叠（闭区间）

    三个子句任一成立即重叠：
    入住日落在区间内 / 离店日落在区间内 / 预订完全覆盖区间
    """
    return or_(
        and_(Booking.check_in >= start, Booking.check_in <= end),
        and_(Booking.check_out >= start, Booking.check_out <= end),
        and_(Booking.check_in <= start, Booking.check_out >= end),
    )


def room_filters(type: Optional[RoomType] = None,
                 status: Optional[RoomStatus] = None,
                 min_price: Optional[float] = None,
                 max_price: Optional[float] = None) -> List:
    criteria = []
    if type is not None:
        criteria.append(Room.type == type)
    if status is not None:
        criteria.append(Room.status == status)
    if min_price is not None:
        criteria.append(Room.base_price >= min_price)
    if max_price is not None:
        criteria.append(Room.base_price <= max_price)
    return criteria


def booking_filters(status: Optional[BookingStatus] = None,
                    guest_id: Optional[int] = None,
                    room_id: Optional[int] = None,
                    from_date: Optional[date] = None,
                    to_date: Optional[date] = None) -> List:
    criteria = []
    if status is not None:
        criteria.append(Booking.status == status)
    if guest_id is not None:
        criteria.append(Booking.guest_id == guest_id)
    if room_id is not None:
        criteria.append(Booking.room_id == room_id)

    if from_date and to_date:
        criteria.append(date_overlap_clause(from_date, to_date))
    elif from_date:
        criteria.append(or_(Booking.check_in >= from_date, Booking.check_out >= from_date))
    elif to_date:
        criteria.append(or_(Booking.check_in <= to_date, Booking.check_out <= to_date))
    return criteria


def room_conflict_filters(room_id: int, check_in: date, check_out: date) -> List:
    """同一房间、仍占用房间且日期重叠的预订"""
    return [
        Booking.room_id == room_id,
        Booking.status.notin_(INACTIVE_BOOKING_STATUSES),
        date_overlap_clause(check_in, check_out),
    ]


def service_filters(type: Optional[ServiceType] = None,
                    status: Optional[ServiceStatus] = None,
                    guest_id: Optional[int] = None,
                    room_id: Optional[int] = None,
                    booking_id: Optional[int] = None) -> List:
    criteria = []
    if type is not None:
        criteria.append(ServiceRequest.type == type)
    if status is not None:
        criteria.append(ServiceRequest.status == status)
    if guest_id is not None:
        criteria.append(ServiceRequest.guest_id == guest_id)
    if room_id is not None:
        criteria.append(ServiceRequest.room_id == room_id)
    if booking_id is not None:
        criteria.append(ServiceRequest.booking_id == booking_id)
    return criteria


def user_filters(role: Optional[UserRole] = None) -> List:
    return [User.role == role] if role is not None else []


def maintenance_filters(status: Optional[MaintenanceStatus] = None,
                        priority: Optional[MaintenancePriority] = None) -> List:
    criteria = []
    if status is not None:
        criteria.append(MaintenanceTask.status == status)
    if priority is not None:
        criteria.append(MaintenanceTask.priority == priority)
    return criteria
