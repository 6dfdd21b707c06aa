"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String

from catalog.database import Base


class User(Base):
    """Represents a registered account; courses are owned by users."""
    __tablename__ = "Users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column("firstName", String(255), nullable=False, default="")
    last_name = Column("lastName", String(255), nullable=False, default="")
    email_address = Column("emailAddress", String(255), nullable=False, unique=True, default="")
    password = Column(String(255), nullable=False, default="")  # bcrypt hash
    created_at = Column("createdAt", DateTime, nullable=False)
    updated_at = Column("updatedAt", DateTime, nullable=False)
