"""
库存管理路由
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_api.database import get_db
from hotel_api.models.schemas import (
    InventoryCreate, InventoryUpdate, InventoryResponse, MessageResponse
)
from hotel_api.services.inventory_service import InventoryService
from hotel_api.services.errors import NotFoundError

router = APIRouter(prefix="/api/inventory", tags=["库存管理"])


@router.get("", response_model=List[InventoryResponse])
def list_items(db: Session = Depends(get_db)):
    """获取库存列表"""
    return InventoryService(db).get_items()


@router.get("/{item_id}", response_model=InventoryResponse)
def get_item(item_id: int, db: Session = Depends(get_db)):
    item = InventoryService(db).get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.post("", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED)
def create_item(data: InventoryCreate, db: Session = Depends(get_db)):
    """新增库存物品"""
    service = InventoryService(db)
    try:
        return service.create_item(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{item_id}", response_model=InventoryResponse)
def update_item(item_id: int, data: InventoryUpdate, db: Session = Depends(get_db)):
    """更新库存物品"""
    service = InventoryService(db)
    try:
        return service.update_item(item_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(item_id: int, db: Session = Depends(get_db)):
    """删除库存物品"""
    service = InventoryService(db)
    try:
        service.delete_item(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(msg="Item deleted")
