"""
预订管理路由
"""
from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.entities import BookingStatus
from hotel_api.models.schemas import (
    BookingCreate, BookingUpdate, BookingResponse, MessageResponse
)
from hotel_api.services.booking_service import BookingService
from hotel_api.services.errors import NotFoundError

router = APIRouter(prefix="/api/bookings", tags=["预订管理"])


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    status: Optional[BookingStatus] = None,
    guest_id: Optional[int] = Query(None, alias="guestId"),
    room_id: Optional[int] = Query(None, alias="roomId"),
    from_date: Optional[datetime] = Query(None, alias="fromDate"),
    to_date: Optional[datetime] = Query(None, alias="toDate"),
    db: Session = Depends(get_db)
):
    """
    获取预订列表

    fromDate/toDate 可传日期或完整时间戳，只取日期部分
    """
    service = BookingService(db)
    bookings = service.get_bookings(
        status, guest_id, room_id,
        from_date.date() if from_date else None,
        to_date.date() if to_date else None,
    )
    return [BookingResponse(**service.get_booking_detail(b)) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    """获取预订详情"""
    service = BookingService(db)
    booking = service.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return BookingResponse(**service.get_booking_detail(booking))


@router.post("", response_model=BookingResponse)
def create_booking(data: BookingCreate, db: Session = Depends(get_db)):
    """创建预订"""
    service = BookingService(db)
    try:
        booking = service.create_booking(data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return BookingResponse(**service.get_booking_detail(booking))


@router.put("/{booking_id}", response_model=BookingResponse)
def update_booking(booking_id: int, data: BookingUpdate, db: Session = Depends(get_db)):
    """更新预订（状态变化联动房间状态）"""
    service = BookingService(db)
    try:
        booking = service.update_booking(booking_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return BookingResponse(**service.get_booking_detail(booking))


@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    """删除预订"""
    service = BookingService(db)
    try:
        service.delete_booking(booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(msg="Booking removed")
