# task_tracker\core\domain\models.py
from pydantic import BaseModel, Field, field_validator


class Task(BaseModel):
    """
    A single tracked task.

    Field order is part of the wire format: id, title, completed.
    """
    id: int = Field(..., gt=0, description="Store-assigned identifier, never reused")
    title: str = Field(..., description="Human readable title, never blank")
    completed: bool = Field(False, description="Completion flag")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value
