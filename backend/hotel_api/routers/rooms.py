"""
房间管理路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.entities import RoomType, RoomStatus
from hotel_api.models.schemas import RoomCreate, RoomUpdate, RoomResponse, MessageResponse
from hotel_api.services.room_service import RoomService
from hotel_api.services.errors import NotFoundError

router = APIRouter(prefix="/api/rooms", tags=["房间管理"])


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    type: Optional[RoomType] = None,
    status: Optional[RoomStatus] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    db: Session = Depends(get_db)
):
    """获取房间列表"""
    service = RoomService(db)
    return service.get_rooms(type, status, min_price, max_price)


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """获取房间详情"""
    room = RoomService(db).get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.post("", response_model=RoomResponse)
def create_room(data: RoomCreate, db: Session = Depends(get_db)):
    """创建房间"""
    service = RoomService(db)
    try:
        return service.create_room(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, data: RoomUpdate, db: Session = Depends(get_db)):
    """更新房间"""
    service = RoomService(db)
    try:
        return service.update_room(room_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(room_id: int, db: Session = Depends(get_db)):
    """删除房间（不影响其预订）"""
    service = RoomService(db)
    try:
        service.delete_room(room_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(msg="Room removed")
