"""Course model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from catalog.database import Base


class Course(Base):
    """Represents a course owned by a user."""
    __tablename__ = "Courses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    estimated_time = Column("estimatedTime", String(255), nullable=True)
    materials_needed = Column("materialsNeeded", Text, nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False)
    updated_at = Column("updatedAt", DateTime, nullable=False)
    user_id = Column(
        "userId",
        Integer,
        ForeignKey("Users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
