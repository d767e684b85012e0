"""
统计服务
营收趋势、预订分布与运营概览；每次调用全量扫描
"""
import calendar
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from hotel_api.models.entities import (
    Booking, BookingStatus, Room, RoomStatus, ServiceRequest, ServiceStatus,
    User, UserRole
)

# 粒度
BUCKET_MONTH = "month"
BUCKET_DAY = "day"


def months_before(moment: datetime, months: int) -> datetime:
    """向前推 N 个自然月，日期超出目标月天数时取月末"""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def revenue_window(period: Optional[str], now: datetime) -> Tuple[datetime, str]:
    """
    根据统计周期计算起点与分组粒度

    yearly  -> 近一年，按月
    monthly -> 近一月，按天
    weekly  -> 近七天，按天
    其他    -> 近三个月，按月
    """
    if period == "yearly":
        return months_before(now, 12), BUCKET_MONTH
    if period == "monthly":
        return months_before(now, 1), BUCKET_DAY
    if period == "weekly":
        return now - timedelta(days=7), BUCKET_DAY
    return months_before(now, 3), BUCKET_MONTH


def stay_length(booking: Booking) -> int:
    """入住天数"""
    return (booking.check_out - booking.check_in).days


class AnalyticsService:
    """统计服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_overview(self) -> dict:
        """运营概览"""
        room_counts: Dict[RoomStatus, int] = dict(
            self.db.query(Room.status, func.count(Room.id)).group_by(Room.status).all()
        )
        total_rooms = sum(room_counts.values())
        occupied = room_counts.get(RoomStatus.OCCUPIED, 0)

        total_guests = self.db.query(User).filter(User.role == UserRole.GUEST).count()
        total_staff = self.db.query(User).filter(User.role != UserRole.GUEST).count()

        active_bookings = self.db.query(Booking).filter(
            Booking.status.in_([BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN])
        ).count()

        pending_services = self.db.query(ServiceRequest).filter(
            ServiceRequest.status.in_([ServiceStatus.PENDING, ServiceStatus.PROCESSING])
        ).count()

        occupancy_rate = (occupied / total_rooms * 100) if total_rooms > 0 else 0

        return {
            'total_rooms': total_rooms,
            'occupied_rooms': occupied,
            'available_rooms': room_counts.get(RoomStatus.AVAILABLE, 0),
            'maintenance_rooms': room_counts.get(RoomStatus.MAINTENANCE, 0),
            'cleaning_rooms': room_counts.get(RoomStatus.CLEANING, 0),
            'total_guests': total_guests,
            'total_staff': total_staff,
            'active_bookings': active_bookings,
            'pending_services': pending_services,
            'occupancy_rate': round(occupancy_rate, 2),
        }

    def get_revenue_report(self, period: Optional[str] = None,
                           now: Optional[datetime] = None) -> List[dict]:
        """
        营收趋势

        统计窗口内创建且未取消的预订，按自然月或自然日分组，
        每组汇总营收、预订数与平均入住天数。
        """
        now = now or datetime.now()
        start, granularity = revenue_window(period, now)

        bookings = self.db.query(Booking).filter(
            Booking.created_at >= start,
            Booking.created_at <= now,
            Booking.status != BookingStatus.CANCELLED,
        ).all()

        buckets: Dict[date, List[Booking]] = defaultdict(list)
        for booking in bookings:
            created = booking.created_at
            day = created.day if granularity == BUCKET_DAY else 1
            buckets[date(created.year, created.month, day)].append(booking)

        result = []
        for bucket_start in sorted(buckets):
            group = buckets[bucket_start]
            avg_stay = sum(stay_length(b) for b in group) / len(group)
            result.append({
                'date': bucket_start,
                'month': calendar.month_name[bucket_start.month],
                'day': bucket_start.day,
                'year': bucket_start.year,
                'revenue': sum(b.total_price for b in group),
                'bookings': len(group),
                'avg_stay_length': round(avg_stay, 1),
            })
        return result

    def get_booking_analytics(self) -> dict:
        """按预订渠道、房型统计预订数与营收"""
        booking_count = func.count(Booking.id)
        revenue = func.coalesce(func.sum(Booking.total_price), 0)

        sources = self.db.query(Booking.booking_source, booking_count, revenue).group_by(
            Booking.booking_source
        ).order_by(booking_count.desc()).all()

        # 内连接：房间已删除的预订不计入房型分布
        room_types = self.db.query(Room.type, booking_count, revenue).select_from(
            Booking
        ).join(Room, Booking.room_id == Room.id).group_by(Room.type).order_by(booking_count.desc()).all()

        return {
            'booking_sources': [
                {'channel': source, 'bookings': count, 'revenue': total}
                for source, count, total in sources
            ],
            'room_type_distribution': [
                {'type': room_type, 'bookings': count, 'revenue': total}
                for room_type, count, total in room_types
            ],
        }
