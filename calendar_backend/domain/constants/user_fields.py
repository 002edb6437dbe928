"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    HASHED_PASSWORD = "hashed_password"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields matched by user search
    SEARCHABLE = (USERNAME, EMAIL, FIRST_NAME, LAST_NAME)
