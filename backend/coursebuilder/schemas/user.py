from datetime import datetime

from coursebuilder.schemas.common import CamelModel


class User(CamelModel):
    id: str
    name: str
    email: str | None = None
    role: str = "learner"


class Achievement(CamelModel):
    id: str
    title: str
    description: str = ""
    icon: str | None = None
    earned_by: str
    earned_at: datetime | None = None
