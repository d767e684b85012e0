# API Routers
from hotel_api.routers import rooms, bookings, users, services, inventory, maintenance, analytics

__all__ = ['rooms', 'bookings', 'users', 'services', 'inventory', 'maintenance', 'analytics']
