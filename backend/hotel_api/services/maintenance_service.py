"""
维修任务服务
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session, joinedload
from hotel_api.models.entities import (
    MaintenanceTask, MaintenanceStatus, MaintenancePriority, Room
)
from hotel_api.models.schemas import MaintenanceTaskCreate, MaintenanceTaskUpdate
from hotel_api.services.errors import NotFoundError
from hotel_api.services.filters import maintenance_filters

logger = logging.getLogger(__name__)

# 演示数据：(房间号, 问题, 状态, 优先级, 报告人)
DEMO_TASKS = [
    ("101", "Leaky faucet in bathroom", MaintenanceStatus.PENDING, MaintenancePriority.MEDIUM, "Reception"),
    ("202", "AC not cooling", MaintenanceStatus.IN_PROGRESS, MaintenancePriority.HIGH, "Guest"),
    ("303", "Broken window lock", MaintenanceStatus.COMPLETED, MaintenancePriority.LOW, "Housekeeping"),
]


class MaintenanceService:
    """维修任务服务"""

    def __init__(self, db: Session):
        self.db = db

    def get_tasks(self, status: Optional[MaintenanceStatus] = None,
                  priority: Optional[MaintenancePriority] = None) -> List[MaintenanceTask]:
        """获取维修任务列表，最新的在前"""
        criteria = maintenance_filters(status, priority)
        return self.db.query(MaintenanceTask).options(
            joinedload(MaintenanceTask.room)
        ).filter(*criteria).order_by(
            MaintenanceTask.created_at.desc(), MaintenanceTask.id.desc()
        ).all()

    def get_task(self, task_id: int) -> Optional[MaintenanceTask]:
        return self.db.query(MaintenanceTask).filter(MaintenanceTask.id == task_id).first()

    def create_task(self, data: MaintenanceTaskCreate) -> MaintenanceTask:
        """创建维修任务"""
        if data.room_id is not None:
            room = self.db.query(Room).filter(Room.id == data.room_id).first()
            if not room:
                raise NotFoundError("Room not found")

        task = MaintenanceTask(**data.model_dump())
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Maintenance task {task.id} reported: {task.issue}")
        return task

    def update_task(self, task_id: int, data: MaintenanceTaskUpdate) -> MaintenanceTask:
        """更新状态、优先级、指派人或问题描述"""
        task = self.get_task(task_id)
        if not task:
            raise NotFoundError("Task not found")

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(task, key, value)

        self.db.commit()
        self.db.refresh(task)
        return task

    def delete_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        if not task:
            raise NotFoundError("Task not found")

        self.db.delete(task)
        self.db.commit()

    def get_task_detail(self, task: MaintenanceTask) -> dict:
        room = task.room
        return {
            'id': task.id,
            'room_id': task.room_id,
            'room': {
                'id': room.id, 'room_number': room.room_number, 'type': room.type
            } if room else None,
            'issue': task.issue,
            'status': task.status,
            'priority': task.priority,
            'reported_by': task.reported_by,
            'assigned_to': task.assigned_to,
            'created_at': task.created_at,
            'updated_at': task.updated_at,
        }


def seed_demo_tasks(db: Session) -> int:
    """
    写入演示维修任务（幂等：已有任务时跳过）

    Returns:
        新增的任务数
    """
    if db.query(MaintenanceTask).count() > 0:
        return 0

    created = 0
    for room_number, issue, status, priority, reported_by in DEMO_TASKS:
        room = db.query(Room).filter(Room.room_number == room_number).first()
        db.add(MaintenanceTask(
            room_id=room.id if room else None,
            issue=issue,
            status=status,
            priority=priority,
            reported_by=reported_by,
        ))
        created += 1
    db.commit()
    return created
