# Services
from hotel_api.services.errors import NotFoundError

__all__ = ['NotFoundError']
