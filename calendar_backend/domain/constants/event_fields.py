
class EventFields:
    """MongoDB field names for events collection"""

    MONGO_ID = "_id"

    TITLE = "title"
    DESCRIPTION = "description"

    START_TIME = "start_time"
    END_TIME = "end_time"

    LOCATION = "location"
    EVENT_TYPE = "event_type"
    STATUS = "status"

    IS_ALL_DAY = "is_all_day"
    IS_RECURRING = "is_recurring"
    RECURRENCE_PATTERN = "recurrence_pattern"

    OWNER_USER_ID = "owner_user_id"
    PARTICIPANT_IDS = "participant_ids"

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
