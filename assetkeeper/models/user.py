"""
User accounts
"""

from enum import Enum
from passlib.context import CryptContext
from sqlalchemy import Column, String, Boolean, CheckConstraint
from assetkeeper.models.base import BaseModel, enum_check

bcrypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserRole(str, Enum):
    """Access roles"""
    PUBLIC = "public"
    STAFF = "staff"
    ADMIN = "admin"


class User(BaseModel):
    """Staff or admin account; the password column only ever holds a hash"""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.STAFF.value)

    # Soft delete flag
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint(enum_check("role", UserRole), name="ck_user_role"),
    )

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)
