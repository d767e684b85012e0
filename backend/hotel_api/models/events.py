"""
领域事件
预订、房间状态与库存状态变化时发布
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class EventType(str, Enum):
    BOOKING_CREATED = "booking.created"
    BOOKING_STATUS_CHANGED = "booking.status_changed"
    ROOM_STATUS_CHANGED = "room.status_changed"
    INVENTORY_STATUS_CHANGED = "inventory.status_changed"


@dataclass
class BaseEventData:
    """事件载荷，to_dict 输出可直接写日志或 JSON 的字典"""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        payload = {f.name: getattr(self, f.name) for f in fields(self)}
        payload["timestamp"] = self.timestamp.isoformat()
        return payload


@dataclass
class BookingCreatedData(BaseEventData):
    booking_id: int = 0
    room_id: int = 0
    room_number: str = ""
    guest_id: int = 0
    check_in: str = ""
    check_out: str = ""
    total_price: float = 0.0


@dataclass
class BookingStatusChangedData(BaseEventData):
    booking_id: int = 0
    room_id: int = 0
    old_status: str = ""
    new_status: str = ""


@dataclass
class RoomStatusChangedData(BaseEventData):
    """reason 说明由哪次预订操作引起"""
    room_id: int = 0
    room_number: str = ""
    old_status: str = ""
    new_status: str = ""
    reason: str = ""


@dataclass
class InventoryStatusChangedData(BaseEventData):
    """新建物品时 old_status 为 None"""
    item_id: int = 0
    name: str = ""
    stock: int = 0
    old_status: Optional[str] = None
    new_status: str = ""
