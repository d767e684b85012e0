"""
Pydantic 模式定义
用于 API 请求/响应验证，对外字段统一使用 camelCase
"""
from datetime import datetime, date
from typing import Optional, List, Union
from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel
from hotel_api.models.entities import (
    UserRole, IdProofType, RoomType, RoomStatus, BookingStatus, PaymentStatus,
    BookingSource, ServiceType, ServiceStatus, StockStatus,
    MaintenanceStatus, MaintenancePriority
)


class CamelModel(BaseModel):
    """内部 snake_case，对外 camelCase"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    msg: str


# ============== 用户 Schemas ==============

class UserBase(CamelModel):
    full_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    id_proof_type: Optional[IdProofType] = None
    id_proof_number: Optional[str] = Field(None, max_length=50)

    @field_validator('full_name', 'phone', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserCreate(UserBase):
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=1)
    role: UserRole
    employee_id: Optional[str] = Field(None, max_length=50)
    joining_date: Optional[date] = None

    @field_validator('username', mode='before')
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class UserUpdate(UserBase):
    email: Optional[str] = Field(None, min_length=3, max_length=100)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class PasswordChange(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=1)


class UserResponse(UserBase):
    id: int
    username: str
    email: str
    role: UserRole
    employee_id: Optional[str] = None
    joining_date: Optional[date] = None
    is_active: bool
    created_at: datetime


class UserSummary(CamelModel):
    id: int
    username: str
    full_name: Optional[str] = None


# ============== 房间 Schemas ==============

class RoomBase(CamelModel):
    room_number: str = Field(..., min_length=1, max_length=10)
    type: RoomType = RoomType.STANDARD
    base_price: float = Field(..., ge=0)
    weekend_price: float = Field(..., ge=0)
    holiday_price: float = Field(..., ge=0)
    amenities: List[str] = Field(default_factory=list)
    capacity: int = Field(default=2, ge=1)
    images: List[str] = Field(default_factory=list)

    @field_validator('room_number', mode='before')
    @classmethod
    def strip_room_number(cls, v):
        return v.strip() if isinstance(v, str) else v


class RoomCreate(RoomBase):
    pass


class RoomUpdate(CamelModel):
    room_number: Optional[str] = Field(None, min_length=1, max_length=10)
    type: Optional[RoomType] = None
    base_price: Optional[float] = Field(None, ge=0)
    weekend_price: Optional[float] = Field(None, ge=0)
    holiday_price: Optional[float] = Field(None, ge=0)
    status: Optional[RoomStatus] = None
    amenities: Optional[List[str]] = None
    capacity: Optional[int] = Field(None, ge=1)
    images: Optional[List[str]] = None


class RoomResponse(RoomBase):
    id: int
    status: RoomStatus
    created_at: datetime
    updated_at: datetime


class RoomSummary(CamelModel):
    id: int
    room_number: str
    type: RoomType


# ============== 预订 Schemas ==============

class BookingCreate(CamelModel):
    # 兼容前端把下拉框展示文本当作 roomId 提交的情况
    room_id: Union[int, str]
    guest_id: int
    check_in: date
    check_out: date
    number_of_guests: int = Field(default=1, ge=1)
    total_price: float = Field(..., ge=0)
    special_requests: Optional[str] = None
    booking_source: Optional[BookingSource] = None


class BookingUpdate(CamelModel):
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    number_of_guests: Optional[int] = Field(None, ge=1)
    status: Optional[BookingStatus] = None
    total_price: Optional[float] = Field(None, ge=0)
    payment_status: Optional[PaymentStatus] = None
    special_requests: Optional[str] = None


class BookingRoomSummary(RoomSummary):
    base_price: float
    status: RoomStatus


class BookingGuestSummary(UserSummary):
    email: str
    phone: Optional[str] = None


class BookingResponse(CamelModel):
    id: int
    room_id: int
    guest_id: int
    check_in: date
    check_out: date
    number_of_guests: int
    status: BookingStatus
    total_price: float
    payment_status: PaymentStatus
    special_requests: Optional[str] = None
    booking_source: BookingSource
    created_at: datetime
    updated_at: datetime
    room: Optional[BookingRoomSummary] = None
    guest: Optional[BookingGuestSummary] = None
    guest_name: Optional[str] = None
    phone: Optional[str] = None


# ============== 客房服务 Schemas ==============

class ServiceRequestCreate(CamelModel):
    type: ServiceType
    guest_id: int
    room_id: int
    booking_id: Optional[int] = None
    item: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(default=1, ge=1)
    price: float = Field(default=0, ge=0)
    notes: Optional[str] = None


class ServiceRequestUpdate(CamelModel):
    status: Optional[ServiceStatus] = None
    assigned_to: Optional[int] = None
    notes: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)


class ServiceRequestResponse(CamelModel):
    id: int
    type: ServiceType
    guest_id: int
    room_id: int
    booking_id: Optional[int] = None
    item: str
    quantity: int
    price: float
    status: ServiceStatus
    notes: Optional[str] = None
    assigned_to: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    guest: Optional[UserSummary] = None
    room: Optional[RoomSummary] = None
    assignee: Optional[UserSummary] = None


# ============== 库存 Schemas ==============

class InventoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    stock: int = Field(default=0, ge=0)
    low_threshold: int = Field(default=50, ge=0)
    critical_threshold: int = Field(default=10, ge=0)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class InventoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    stock: Optional[int] = Field(None, ge=0)
    low_threshold: Optional[int] = Field(None, ge=0)
    critical_threshold: Optional[int] = Field(None, ge=0)

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class InventoryResponse(CamelModel):
    id: int
    name: str
    stock: int
    status: StockStatus
    low_threshold: int
    critical_threshold: int
    created_at: datetime
    updated_at: datetime


# ============== 维修任务 Schemas ==============

class MaintenanceTaskCreate(CamelModel):
    room_id: Optional[int] = None
    issue: str = Field(..., min_length=1)
    status: MaintenanceStatus = MaintenanceStatus.PENDING
    priority: MaintenancePriority = MaintenancePriority.MEDIUM
    reported_by: Optional[str] = Field(None, max_length=100)
    assigned_to: Optional[str] = Field(None, max_length=100)


class MaintenanceTaskUpdate(CamelModel):
    issue: Optional[str] = Field(None, min_length=1)
    status: Optional[MaintenanceStatus] = None
    priority: Optional[MaintenancePriority] = None
    assigned_to: Optional[str] = Field(None, max_length=100)


class MaintenanceTaskResponse(CamelModel):
    id: int
    room_id: Optional[int] = None
    room: Optional[RoomSummary] = None
    issue: str
    status: MaintenanceStatus
    priority: MaintenancePriority
    reported_by: Optional[str] = None
    assigned_to: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# ============== 统计 Schemas ==============

class OverviewStats(CamelModel):
    total_rooms: int
    occupied_rooms: int
    available_rooms: int
    maintenance_rooms: int
    cleaning_rooms: int
    total_guests: int
    total_staff: int
    active_bookings: int
    pending_services: int
    occupancy_rate: float


class RevenuePoint(CamelModel):
    date: date
    month: str
    day: int
    year: int
    revenue: float
    bookings: int
    avg_stay_length: float


class ChannelStat(CamelModel):
    channel: BookingSource
    bookings: int
    revenue: float


class RoomTypeStat(CamelModel):
    type: RoomType
    bookings: int
    revenue: float


class BookingAnalytics(CamelModel):
    booking_sources: List[ChannelStat]
    room_type_distribution: List[RoomTypeStat]
