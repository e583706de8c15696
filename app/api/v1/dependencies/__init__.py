"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for application use cases. All use cases are
built from the app's Backends here; routes depend only on these
dependencies, not on infrastructure directly.

Switch backends via DATABASE_BACKEND and CACHE_BACKEND in config.
"""

from ._composition import Backends, build_backends, build_cache_store
from .category import (
    get_categories_use_case,
    get_category_by_id_use_case,
    get_create_category_use_case,
    get_delete_category_use_case,
    get_update_category_use_case,
)
from .common import (
    get_app_settings,
    get_backends,
    get_cache_store,
    get_invalidation_dispatcher,
)
from .tip import (
    get_create_tip_use_case,
    get_delete_tip_use_case,
    get_search_tips_use_case,
    get_tip_by_id_use_case,
    get_tips_by_category_use_case,
    get_update_tip_use_case,
)
from .user import (
    get_create_user_use_case,
    get_dashboard_use_case,
    get_delete_user_use_case,
    get_update_user_name_use_case,
    get_user_by_email_use_case,
    get_user_by_id_use_case,
    get_users_use_case,
)

__all__ = [
    "Backends",
    "build_backends",
    "build_cache_store",
    "get_app_settings",
    "get_backends",
    "get_cache_store",
    "get_categories_use_case",
    "get_category_by_id_use_case",
    "get_create_category_use_case",
    "get_create_tip_use_case",
    "get_create_user_use_case",
    "get_dashboard_use_case",
    "get_delete_category_use_case",
    "get_delete_tip_use_case",
    "get_delete_user_use_case",
    "get_invalidation_dispatcher",
    "get_search_tips_use_case",
    "get_tip_by_id_use_case",
    "get_tips_by_category_use_case",
    "get_update_category_use_case",
    "get_update_tip_use_case",
    "get_update_user_name_use_case",
    "get_user_by_email_use_case",
    "get_user_by_id_use_case",
    "get_users_use_case",
]
