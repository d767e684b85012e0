"""
库存服务
每次写入都按库存与阈值重新推导 status
"""
from typing import Callable, List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_api.models.entities import InventoryItem, StockStatus
from hotel_api.models.events import EventType, InventoryStatusChangedData
from hotel_api.models.schemas import InventoryCreate, InventoryUpdate
from hotel_api.services.errors import NotFoundError
from hotel_api.services.event_bus import event_bus, make_event, Event

logger = logging.getLogger(__name__)


def derive_stock_status(stock: int, low_threshold: int, critical_threshold: int) -> StockStatus:
    """stock <= critical -> Critical；stock <= low -> Low；否则 Sufficient"""
    if stock <= critical_threshold:
        return StockStatus.CRITICAL
    if stock <= low_threshold:
        return StockStatus.LOW
    return StockStatus.SUFFICIENT


class InventoryService:
    """库存服务"""

    def __init__(self, db: Session, event_publisher: Callable[[Event], None] = None):
        self.db = db
        self._publish_event = event_publisher or event_bus.publish

    def get_items(self) -> List[InventoryItem]:
        return self.db.query(InventoryItem).order_by(InventoryItem.name).all()

    def get_item(self, item_id: int) -> Optional[InventoryItem]:
        return self.db.query(InventoryItem).filter(InventoryItem.id == item_id).first()

    def get_item_by_name(self, name: str) -> Optional[InventoryItem]:
        return self.db.query(InventoryItem).filter(InventoryItem.name == name).first()

    def create_item(self, data: InventoryCreate) -> InventoryItem:
        """新增库存物品"""
        if self.get_item_by_name(data.name):
            raise ValueError(f"Inventory item '{data.name}' already exists")

        item = InventoryItem(
            **data.model_dump(),
            status=derive_stock_status(data.stock, data.low_threshold, data.critical_threshold),
        )
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)

        self._notify_status(item, None)
        return item

    def update_item(self, item_id: int, data: InventoryUpdate) -> InventoryItem:
        """更新库存物品"""
        item = self.get_item(item_id)
        if not item:
            raise NotFoundError("Item not found")

        update_data = {
            key: value for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if 'name' in update_data:
            existing = self.get_item_by_name(update_data['name'])
            if existing and existing.id != item_id:
                raise ValueError(f"Inventory item '{update_data['name']}' already exists")

        for key, value in update_data.items():
            setattr(item, key, value)

        old_status = item.status
        item.status = derive_stock_status(item.stock, item.low_threshold, item.critical_threshold)

        self.db.commit()
        self.db.refresh(item)

        if item.status != old_status:
            self._notify_status(item, old_status)
        return item

    def delete_item(self, item_id: int) -> None:
        item = self.get_item(item_id)
        if not item:
            raise NotFoundError("Item not found")

        self.db.delete(item)
        self.db.commit()

    def _notify_status(self, item: InventoryItem, old_status: Optional[StockStatus]) -> None:
        self._publish_event(make_event(
            EventType.INVENTORY_STATUS_CHANGED,
            InventoryStatusChangedData(
                item_id=item.id,
                name=item.name,
                stock=item.stock,
                old_status=old_status.value if old_status else None,
                new_status=item.status.value,
            ),
            source="inventory_service",
        ))
