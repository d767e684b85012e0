"""
实体对象定义
六类业务记录：用户、房间、预订、客房服务、库存、维修任务
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Float, DateTime, Date,
    Text, Enum as SQLEnum, Boolean, JSON
)
from sqlalchemy.orm import relationship
from hotel_api.database import Base


def _enum_values(enum_cls):
    """按枚举值（而非成员名）持久化"""
    return [member.value for member in enum_cls]


def _enum_column(enum_cls, **kwargs):
    return SQLEnum(enum_cls, values_callable=_enum_values, **kwargs)


# ============== 枚举定义 ==============

class UserRole(str, Enum):
    """用户角色"""
    ADMIN = "admin"
    RECEPTIONIST = "receptionist"
    HOUSEKEEPING = "housekeeping"
    GUEST = "guest"


class IdProofType(str, Enum):
    """证件类型"""
    PASSPORT = "Passport"
    DRIVING_LICENSE = "Driving License"
    NATIONAL_ID = "National ID"
    OTHER = "Other"


class RoomType(str, Enum):
    """房型"""
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"
    PRESIDENTIAL = "Presidential"


class RoomStatus(str, Enum):
    """房间状态"""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    MAINTENANCE = "Maintenance"
    CLEANING = "Cleaning"


class BookingStatus(str, Enum):
    """预订状态"""
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """支付状态"""
    PENDING = "pending"
    PARTIAL = "partial"
    COMPLETED = "completed"


class BookingSource(str, Enum):
    """预订渠道"""
    DIRECT_WEBSITE = "Direct Website"
    ONLINE_TRAVEL_AGENCIES = "Online Travel Agencies"
    CORPORATE_BOOKINGS = "Corporate Bookings"
    WALK_IN = "Walk-in"


class ServiceType(str, Enum):
    """客房服务类型"""
    FOOD_AND_BEVERAGE = "Food & Beverage"
    HOUSEKEEPING = "Housekeeping"
    MAINTENANCE = "Maintenance"
    WAKE_UP_CALL = "Wake-up Call"


class ServiceStatus(str, Enum):
    """客房服务状态"""
    PENDING = "pending"
    PROCESSING = "processing"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StockStatus(str, Enum):
    """库存状态"""
    SUFFICIENT = "Sufficient"
    LOW = "Low"
    CRITICAL = "Critical"


class MaintenanceStatus(str, Enum):
    """维修任务状态"""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class MaintenancePriority(str, Enum):
    """维修任务优先级"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ============== 实体定义 ==============

class User(Base):
    """
    用户对象
    员工与客人共用一张表，按 role 区分
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(_enum_column(UserRole), nullable=False)
    full_name = Column(String(100))
    phone = Column(String(20))
    # 客人字段
    address = Column(Text)
    id_proof_type = Column(_enum_column(IdProofType))
    id_proof_number = Column(String(50))
    # 员工字段
    employee_id = Column(String(50))
    joining_date = Column(Date)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.now)

    bookings = relationship(
        "Booking", primaryjoin="User.id == foreign(Booking.guest_id)",
        back_populates="guest", passive_deletes="all"
    )

    @property
    def display_name(self) -> str:
        return self.full_name or self.username


class Room(Base):
    """房间对象"""
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    room_number = Column(String(10), unique=True, nullable=False)
    type = Column(_enum_column(RoomType), nullable=False, default=RoomType.STANDARD)
    base_price = Column(Float, nullable=False)
    weekend_price = Column(Float, nullable=False)
    holiday_price = Column(Float, nullable=False)
    status = Column(_enum_column(RoomStatus), default=RoomStatus.AVAILABLE)
    amenities = Column(JSON, default=list)
    capacity = Column(Integer, default=2)
    images = Column(JSON, default=list)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    bookings = relationship(
        "Booking", primaryjoin="Room.id == foreign(Booking.room_id)",
        back_populates="room", passive_deletes="all"
    )


class Booking(Base):
    """
    预订对象 - 唯一存在跨实体规则的记录
    同一房间的有效预订（非取消、非退房）日期区间不得重叠
    """
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    # 引用列不建外键约束，删除房间或用户后预订保留原 ID
    room_id = Column(Integer, nullable=False, index=True)
    guest_id = Column(Integer, nullable=False, index=True)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    number_of_guests = Column(Integer, nullable=False, default=1)
    status = Column(_enum_column(BookingStatus), default=BookingStatus.CONFIRMED)
    total_price = Column(Float, nullable=False)
    payment_status = Column(_enum_column(PaymentStatus), default=PaymentStatus.PENDING)
    special_requests = Column(Text)
    booking_source = Column(_enum_column(BookingSource), default=BookingSource.DIRECT_WEBSITE)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    room = relationship(
        "Room", primaryjoin="foreign(Booking.room_id) == Room.id", back_populates="bookings"
    )
    guest = relationship(
        "User", primaryjoin="foreign(Booking.guest_id) == User.id", back_populates="bookings"
    )


class ServiceRequest(Base):
    """客房服务请求"""
    __tablename__ = "service_requests"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(_enum_column(ServiceType), nullable=False)
    guest_id = Column(Integer, nullable=False, index=True)
    room_id = Column(Integer, nullable=False, index=True)
    booking_id = Column(Integer, index=True)
    item = Column(String(200), nullable=False)
    quantity = Column(Integer, default=1)
    price = Column(Float, default=0)
    status = Column(_enum_column(ServiceStatus), default=ServiceStatus.PENDING)
    notes = Column(Text)
    assigned_to = Column(Integer)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    guest = relationship("User", primaryjoin="foreign(ServiceRequest.guest_id) == User.id")
    room = relationship("Room", primaryjoin="foreign(ServiceRequest.room_id) == Room.id")
    assignee = relationship("User", primaryjoin="foreign(ServiceRequest.assigned_to) == User.id")


class InventoryItem(Base):
    """库存物品，status 由库存与阈值推导"""
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    status = Column(_enum_column(StockStatus), default=StockStatus.SUFFICIENT)
    low_threshold = Column(Integer, default=50)
    critical_threshold = Column(Integer, default=10)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)


class MaintenanceTask(Base):
    """维修任务"""
    __tablename__ = "maintenance_tasks"

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, index=True)
    issue = Column(Text, nullable=False)
    status = Column(_enum_column(MaintenanceStatus), default=MaintenanceStatus.PENDING)
    priority = Column(_enum_column(MaintenancePriority), default=MaintenancePriority.MEDIUM)
    reported_by = Column(String(100))
    assigned_to = Column(String(100))
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    room = relationship("Room", primaryjoin="foreign(MaintenanceTask.room_id) == Room.id")
