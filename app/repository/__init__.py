"""Repository helpers for the user query service."""

from .user_repository import (
    active_male_users_registered_today,
    active_user_contacts_query,
    active_users_query,
    add_user,
    add_users,
    delete_user,
    fetch_untracked,
    find_first_user_by_user_id,
    get_user_for_update,
    list_active_user_contacts,
    list_users,
    start_of_day,
)

__all__ = [
    "active_male_users_registered_today",
    "active_user_contacts_query",
    "active_users_query",
    "add_user",
    "add_users",
    "delete_user",
    "fetch_untracked",
    "find_first_user_by_user_id",
    "get_user_for_update",
    "list_active_user_contacts",
    "list_users",
    "start_of_day",
]
