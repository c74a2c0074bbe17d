"""Task schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

Priority = Literal["high", "medium", "low"]
PRIORITIES = ("high", "medium", "low")


class Task(BaseModel):
    id: str
    title: str
    description: str
    priority: Priority
    completed: bool = False
    subject: str


class SubjectProgress(BaseModel):
    subject: str
    completed: int
    total: int
    percentage: int


class TaskListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tasks: List[Task]
    completion_percentage: int = Field(alias="completionPercentage")
    subjects: List[SubjectProgress]
