# task_tracker\adapters\api\schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class TaskPayload(BaseModel):
    """
    Body of POST /tasks and PUT /tasks/{id}.

    Unknown keys (including a client supplied "id") are ignored.
    A missing title is reported as an empty title by the store.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[StrictStr] = Field(None, description="Task title, must not be blank")
    completed: Optional[StrictBool] = Field(None, description="Defaults to false")


class DeleteResult(BaseModel):
    status: str = "success"
    message: str = "Task deleted"


class ErrorResponse(BaseModel):
    error: str
