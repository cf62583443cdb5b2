from hardinfinity.crud.cascade import delete_challenge, delete_section, delete_task, reset_challenge
from hardinfinity.crud.challenges import create_challenge, list_challenges, update_challenge
from hardinfinity.crud.entries import get_day_record, list_day_records, upsert_by_day, upsert_today
from hardinfinity.crud.measurements import add_measurement, delete_measurement, list_measurements, update_measurement
from hardinfinity.crud.ordering import SiblingSet
from hardinfinity.crud.ownership import (
    get_owned_challenge,
    get_owned_measurement,
    get_owned_section,
    get_owned_task,
    parse_id,
)
from hardinfinity.crud.progress import StreakSummary, get_challenge_progress, summarize_streaks
from hardinfinity.crud.sections import create_section, list_sections, reorder_section, update_section
from hardinfinity.crud.tasks import create_task, list_tasks, reorder_task, update_task
from hardinfinity.crud.user import get_user_by_external_id, upsert_user

__all__ = [
    "upsert_user",
    "get_user_by_external_id",
    "parse_id",
    "get_owned_challenge",
    "get_owned_section",
    "get_owned_task",
    "get_owned_measurement",
    "list_challenges",
    "create_challenge",
    "update_challenge",
    "delete_challenge",
    "reset_challenge",
    "SiblingSet",
    "list_sections",
    "create_section",
    "update_section",
    "reorder_section",
    "delete_section",
    "list_tasks",
    "create_task",
    "update_task",
    "reorder_task",
    "delete_task",
    "list_day_records",
    "get_day_record",
    "upsert_today",
    "upsert_by_day",
    "summarize_streaks",
    "StreakSummary",
    "get_challenge_progress",
    "list_measurements",
    "add_measurement",
    "update_measurement",
    "delete_measurement",
]
