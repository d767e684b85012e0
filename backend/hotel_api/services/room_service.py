"""
房间服务
管理 Room 对象；删除房间不级联删除其预订
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_api.models.entities import Room, RoomType, RoomStatus
from hotel_api.models.schemas import RoomCreate, RoomUpdate
from hotel_api.services.errors import NotFoundError
from hotel_api.services.filters import room_filters

logger = logging.getLogger(__name__)


class RoomService:
    """房间服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_rooms(self, type: Optional[RoomType] = None,
                  status: Optional[RoomStatus] = None,
                  min_price: Optional[float] = None,
                  max_price: Optional[float] = None) -> List[Room]:
        """获取房间列表"""
        criteria = room_filters(type, status, min_price, max_price)
        return self.db.query(Room).filter(*criteria).order_by(Room.room_number).all()

    def get_room(self, room_id: int) -> Optional[Room]:
        """获取单个房间"""
        return self.db.query(Room).filter(Room.id == room_id).first()

    def get_room_by_number(self, room_number: str) -> Optional[Room]:
        """根据房间号获取房间"""
        return self.db.query(Room).filter(Room.room_number == room_number).first()

    def create_room(self, data: RoomCreate) -> Room:
        """创建房间"""
        if self.get_room_by_number(data.room_number):
            raise ValueError("Room with this number already exists")

        room = Room(**data.model_dump())
        self.db.add(room)
        self.db.commit()
        self.db.refresh(room)
        logger.info(f"Room {room.room_number} created")
        return room

    def update_room(self, room_id: int, data: RoomUpdate) -> Room:
        """更新房间"""
        room = self.get_room(room_id)
        if not room:
            raise NotFoundError("Room not found")

        update_data = {
            key: value for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if 'room_number' in update_data:
            existing = self.get_room_by_number(update_data['room_number'])
            if existing and existing.id != room_id:
                raise ValueError("Room with this number already exists")

        for key, value in update_data.items():
            setattr(room, key, value)

        self.db.commit()
        self.db.refresh(room)
        return room

    def delete_room(self, room_id: int) -> None:
        """删除房间"""
        room = self.get_room(room_id)
        if not room:
            raise NotFoundError("Room not found")

        self.db.delete(room)
        self.db.commit()
        logger.info(f"Room {room.room_number} removed")
