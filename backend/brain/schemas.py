"""Task generation schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union
from tasks.schemas import Task


class SubjectEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[str, int]] = None
    subject: str
    exam_scope: str = Field(default="", alias="examScope")


class GenerateTasksRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject_entries: List[SubjectEntry] = Field(alias="subjectEntries", min_length=1)


class GenerateTasksResponse(BaseModel):
    tasks: List[Task]
