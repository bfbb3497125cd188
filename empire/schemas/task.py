from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel

from empire.models.enums import Difficulty, ModerationStatus, TaskType


class TaskCreate(BaseModel):
    title: str
    description: str
    category: str
    type: TaskType
    reward: Decimal
    duration: str
    difficulty: Difficulty
    requirements: str
    max_responses: Optional[int] = None
    max_bidders: Optional[int] = None
    deadline: Optional[str] = None
    can_redo: bool = False
    questions: List[Any] = []
    instructions: Optional[str] = None
    audio_url: Optional[str] = None
    is_active: bool = True


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    type: Optional[TaskType] = None
    reward: Optional[Decimal] = None
    duration: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    requirements: Optional[str] = None
    max_responses: Optional[int] = None
    max_bidders: Optional[int] = None
    deadline: Optional[str] = None
    can_redo: Optional[bool] = None
    questions: Optional[List[Any]] = None
    instructions: Optional[str] = None
    audio_url: Optional[str] = None
    is_active: Optional[bool] = None


class TaskOut(BaseModel):
    id: int
    title: str
    description: str
    category: str
    type: TaskType
    reward: Decimal
    duration: str
    difficulty: Difficulty
    requirements: str
    max_responses: Optional[int]
    current_responses: int
    max_bidders: Optional[int]
    current_bidders: int
    deadline: Optional[str]
    can_redo: bool
    questions: List[Any]
    instructions: Optional[str]
    audio_url: Optional[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class TaskSubmitRequest(BaseModel):
    response: Optional[str] = None


class SubmissionOut(BaseModel):
    id: int
    task_id: int
    account_id: int
    response: str
    status: ModerationStatus
    feedback: Optional[str]
    processed_by_id: Optional[int]
    processed_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True


class SubmissionDetailOut(SubmissionOut):
    """Submission with the task and submitter it refers to"""
    task_title: str
    task_reward: Decimal
    account_name: str
    account_email: str
