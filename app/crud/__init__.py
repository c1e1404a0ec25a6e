from app.crud.quiz import (
    create_quiz,
    delete_quiz,
    get_quiz_by_id,
    get_quizzes_by_resource_id,
)
from app.crud.resource import (
    create_resource,
    delete_resource,
    get_all_resources,
    get_resource_by_id,
    update_resource,
)
from app.crud.seed import seed_demo_data
from app.crud.user_progress import (
    get_user_progress_by_user_and_resource,
    get_user_progress_by_user_id,
    save_user_progress,
)

__all__ = [
    "get_all_resources",
    "get_resource_by_id",
    "create_resource",
    "update_resource",
    "delete_resource",
    "get_quizzes_by_resource_id",
    "get_quiz_by_id",
    "create_quiz",
    "delete_quiz",
    "get_user_progress_by_user_id",
    "get_user_progress_by_user_and_resource",
    "save_user_progress",
    "seed_demo_data",
]
