"""
客房服务路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.entities import ServiceType, ServiceStatus
from hotel_api.models.schemas import (
    ServiceRequestCreate, ServiceRequestUpdate, ServiceRequestResponse, MessageResponse
)
from hotel_api.services.service_request_service import ServiceRequestService
from hotel_api.services.errors import NotFoundError

router = APIRouter(prefix="/api/services", tags=["客房服务"])


@router.get("", response_model=List[ServiceRequestResponse])
def list_service_requests(
    type: Optional[ServiceType] = None,
    status: Optional[ServiceStatus] = None,
    guest_id: Optional[int] = Query(None, alias="guestId"),
    room_id: Optional[int] = Query(None, alias="roomId"),
    booking_id: Optional[int] = Query(None, alias="bookingId"),
    db: Session = Depends(get_db)
):
    """获取服务请求列表"""
    service = ServiceRequestService(db)
    requests = service.get_requests(type, status, guest_id, room_id, booking_id)
    return [ServiceRequestResponse(**service.get_request_detail(r)) for r in requests]


@router.get("/{service_id}", response_model=ServiceRequestResponse)
def get_service_request(service_id: int, db: Session = Depends(get_db)):
    """获取服务请求详情"""
    service = ServiceRequestService(db)
    request = service.get_request(service_id)
    if not request:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service request not found")
    return ServiceRequestResponse(**service.get_request_detail(request))


@router.post("", response_model=ServiceRequestResponse)
def create_service_request(data: ServiceRequestCreate, db: Session = Depends(get_db)):
    """创建服务请求"""
    service = ServiceRequestService(db)
    request = service.create_request(data)
    return ServiceRequestResponse(**service.get_request_detail(request))


@router.put("/{service_id}", response_model=ServiceRequestResponse)
def update_service_request(service_id: int, data: ServiceRequestUpdate,
                           db: Session = Depends(get_db)):
    """更新服务请求"""
    service = ServiceRequestService(db)
    try:
        request = service.update_request(service_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceRequestResponse(**service.get_request_detail(request))


@router.delete("/{service_id}", response_model=MessageResponse)
def delete_service_request(service_id: int, db: Session = Depends(get_db)):
    """删除服务请求"""
    service = ServiceRequestService(db)
    try:
        service.delete_request(service_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(msg="Service request removed")
