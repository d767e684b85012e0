"""
客房服务请求
客人发起的送餐、清洁、维修、叫醒等请求
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from hotel_api.models.entities import ServiceRequest, ServiceType, ServiceStatus
from hotel_api.models.schemas import ServiceRequestCreate, ServiceRequestUpdate
from hotel_api.services.errors import NotFoundError
from hotel_api.services.filters import service_filters


class ServiceRequestService:
    """客房服务请求服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_requests(self, type: Optional[ServiceType] = None,
                     status: Optional[ServiceStatus] = None,
                     guest_id: Optional[int] = None,
                     room_id: Optional[int] = None,
                     booking_id: Optional[int] = None) -> List[ServiceRequest]:
        """获取服务请求列表，最新的在前"""
        criteria = service_filters(type, status, guest_id, room_id, booking_id)
        return self.db.query(ServiceRequest).options(
            joinedload(ServiceRequest.guest),
            joinedload(ServiceRequest.room),
            joinedload(ServiceRequest.assignee),
        ).filter(*criteria).order_by(
            ServiceRequest.created_at.desc(), ServiceRequest.id.desc()
        ).all()

    def get_request(self, request_id: int) -> Optional[ServiceRequest]:
        return self.db.query(ServiceRequest).filter(ServiceRequest.id == request_id).first()

    def create_request(self, data: ServiceRequestCreate) -> ServiceRequest:
        """创建服务请求"""
        request = ServiceRequest(**data.model_dump())
        self.db.add(request)
        self.db.commit()
        self.db.refresh(request)
        return request

    def update_request(self, request_id: int, data: ServiceRequestUpdate) -> ServiceRequest:
        """更新状态、指派人、备注或价格"""
        request = self.get_request(request_id)
        if not request:
            raise NotFoundError("Service request not found")

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(request, key, value)

        self.db.commit()
        self.db.refresh(request)
        return request

    def delete_request(self, request_id: int) -> None:
        request = self.get_request(request_id)
        if not request:
            raise NotFoundError("Service request not found")

        self.db.delete(request)
        self.db.commit()

    def get_request_detail(self, request: ServiceRequest) -> dict:
        """服务请求详情（附带客人、房间、指派人摘要）"""
        def user_summary(user):
            if user is None:
                return None
            return {'id': user.id, 'username': user.username, 'full_name': user.full_name}

        room = request.room
        return {
            'id': request.id,
            'type': request.type,
            'guest_id': request.guest_id,
            'room_id': request.room_id,
            'booking_id': request.booking_id,
            'item': request.item,
            'quantity': request.quantity,
            'price': request.price,
            'status': request.status,
            'notes': request.notes,
            'assigned_to': request.assigned_to,
            'created_at': request.created_at,
            'updated_at': request.updated_at,
            'guest': user_summary(request.guest),
            'room': {
                'id': room.id, 'room_number': room.room_number, 'type': room.type
            } if room else None,
            'assignee': user_summary(request.assignee),
        }
