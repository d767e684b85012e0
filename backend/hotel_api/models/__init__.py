# Entity Models
from hotel_api.models.entities import (
    User, Room, Booking, ServiceRequest, InventoryItem, MaintenanceTask
)

__all__ = [
    'User', 'Room', 'Booking', 'ServiceRequest', 'InventoryItem', 'MaintenanceTask'
]
