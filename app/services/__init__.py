from .user_form_service import UserFormService, UserNotFoundError
from .user_query_service import UserQueryService, build_user

__all__ = [
    "UserFormService",
    "UserNotFoundError",
    "UserQueryService",
    "build_user",
]
