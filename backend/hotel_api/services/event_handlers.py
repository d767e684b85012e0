"""
事件处理器
订阅领域事件并写入运营日志；库存告急时给出告警
"""
import logging

from hotel_api.models.entities import StockStatus
from hotel_api.models.events import EventType
from hotel_api.services.event_bus import event_bus, Event

logger = logging.getLogger(__name__)


def handle_booking_created(event: Event) -> None:
    data = event.data
    logger.info(
        f"Booking {data.get('booking_id')} created: room {data.get('room_number')} "
        f"{data.get('check_in')} -> {data.get('check_out')}"
    )


def handle_booking_status_changed(event: Event) -> None:
    data = event.data
    logger.info(
        f"Booking {data.get('booking_id')} status "
        f"{data.get('old_status')} -> {data.get('new_status')}"
    )


def handle_room_status_changed(event: Event) -> None:
    data = event.data
    logger.info(
        f"Room {data.get('room_number')} status {data.get('old_status')} -> "
        f"{data.get('new_status')} ({data.get('reason')})"
    )


def handle_inventory_status_changed(event: Event) -> None:
    """Low / Critical 记为告警"""
    data = event.data
    new_status = data.get('new_status')
    message = f"Inventory '{data.get('name')}' stock {data.get('stock')} is {new_status}"
    if new_status in (StockStatus.LOW.value, StockStatus.CRITICAL.value):
        logger.warning(message)
    else:
        logger.info(message)


def register_event_handlers() -> None:
    """注册所有事件处理器（重复调用无副作用）"""
    event_bus.subscribe(EventType.BOOKING_CREATED.value, handle_booking_created)
    event_bus.subscribe(EventType.BOOKING_STATUS_CHANGED.value, handle_booking_status_changed)
    event_bus.subscribe(EventType.ROOM_STATUS_CHANGED.value, handle_room_status_changed)
    event_bus.subscribe(EventType.INVENTORY_STATUS_CHANGED.value, handle_inventory_status_changed)
