from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    func,
)

from contest.database import Base


class ParticipantModel(Base):
    """SQLAlchemy model for participants table."""

    __tablename__ = "participants"
    __table_args__ = (
        CheckConstraint(
            "score IS NULL OR score >= 0", name="ck_participants_score_non_negative"
        ),
        # Never hand out the ID of a deleted participant again on SQLite
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    company = Column(String(255), nullable=False)
    score = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)


# Email addresses are unique regardless of letter case
Index(
    "uq_participants_email_lower",
    func.lower(ParticipantModel.email),
    unique=True,
)
Index("idx_participants_score", ParticipantModel.score.desc())
