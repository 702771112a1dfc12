import enum


class SubmitResult(str, enum.Enum):
    created = "created"
    duplicate = "duplicate"
    invalid = "invalid"
    persist_failed = "persist_failed"
