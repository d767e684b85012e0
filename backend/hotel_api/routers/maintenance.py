"""
维修任务路由
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.entities import MaintenanceStatus, MaintenancePriority
from hotel_api.models.schemas import (
    MaintenanceTaskCreate, MaintenanceTaskUpdate, MaintenanceTaskResponse, MessageResponse
)
from hotel_api.services.maintenance_service import MaintenanceService
from hotel_api.services.errors import NotFoundError

router = APIRouter(prefix="/api/maintenance", tags=["维修管理"])


@router.get("", response_model=List[MaintenanceTaskResponse])
def list_tasks(
    status: Optional[MaintenanceStatus] = None,
    priority: Optional[MaintenancePriority] = None,
    db: Session = Depends(get_db)
):
    """获取维修任务列表"""
    service = MaintenanceService(db)
    return [MaintenanceTaskResponse(**service.get_task_detail(t))
            for t in service.get_tasks(status, priority)]


@router.get("/{task_id}", response_model=MaintenanceTaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    service = MaintenanceService(db)
    task = service.get_task(task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return MaintenanceTaskResponse(**service.get_task_detail(task))


@router.post("", response_model=MaintenanceTaskResponse)
def create_task(data: MaintenanceTaskCreate, db: Session = Depends(get_db)):
    """报修"""
    service = MaintenanceService(db)
    try:
        task = service.create_task(data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MaintenanceTaskResponse(**service.get_task_detail(task))


@router.put("/{task_id}", response_model=MaintenanceTaskResponse)
def update_task(task_id: int, data: MaintenanceTaskUpdate, db: Session = Depends(get_db)):
    """更新维修任务"""
    service = MaintenanceService(db)
    try:
        task = service.update_task(task_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MaintenanceTaskResponse(**service.get_task_detail(task))


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    service = MaintenanceService(db)
    try:
        service.delete_task(task_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(msg="Task removed")
