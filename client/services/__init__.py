from client.services.avatar import AvatarService
from client.services.user import UserService

__all__ = ["AvatarService", "UserService"]
