"""저장소 SQLAlchemy ORM 모델.

Repository model: the code repository entity linked into project columns.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from project_board.database import Base


class Repository(Base):
    """저장소 모델.

    Attributes:
        id: 고유 식별자 (Autoincrement primary key)
        owner_id: 소유자 ID (Owning user/organization id)
        owner_name: 소유자 이름 (Owner display name)
        name: 저장소 이름 (Repository name)
        description: 설명 (Optional description)
        is_private: 비공개 여부 (Private flag)
    """

    __tablename__ = "repository"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    owner_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_private: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    column_links = relationship(
        "ColumnRepo",
        primaryjoin="Repository.id == foreign(ColumnRepo.repo_id)",
        back_populates="repo",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        """소유자/이름 형식: "owner/name"."""
        return f"{self.owner_name}/{self.name}"
