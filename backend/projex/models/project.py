"""Project 애그리거트의 SQLAlchemy 모델 정의입니다.

하위 컬렉션(tasks, columns, timeline, calendar, team)은 하나의 문서처럼 JSON 컬럼에
저장하고, ``version`` 컬럼으로 문서 전체에 대한 낙관적 동시성 제어를 수행합니다.
"""

import uuid

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from projex.database import Base


def _new_project_id() -> str:
    return uuid.uuid4().hex


def _empty_task_stats() -> dict:
    return {"completed": 0, "total": 0}


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(String(32), primary_key=True, default=_new_project_id)
    owner_id = Column(Integer, ForeignKey("accounts.account_id"), nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    due_date = Column(Date)
    color = Column(String(20))
    priority = Column(String(10), default="Medium")  # Low/Medium/High
    progress = Column(Integer, nullable=False, default=0)
    task_stats = Column(JSON, nullable=False, default=_empty_task_stats)
    tasks = Column(JSON, nullable=False, default=list)
    columns = Column(JSON, nullable=False, default=list)
    timeline = Column(JSON, nullable=False, default=list)
    calendar = Column(JSON, nullable=False, default=list)
    team = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    owner = relationship("Account", back_populates="projects")

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index("idx_project_owner", "owner_id"),
    )
