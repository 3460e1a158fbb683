"""Service layer for business logic."""

from app.services.auth_service import AuthService, LoginResult
from app.services.broadcast_service import BroadcastHub, get_broadcast_hub
from app.services.config_service import ConfigService
from app.services.queue_service import QueueService, next_ticket_number
from app.services.user_service import UserService

__all__ = [
    "AuthService",
    "BroadcastHub",
    "ConfigService",
    "LoginResult",
    "QueueService",
    "UserService",
    "get_broadcast_hub",
    "next_ticket_number",
]
