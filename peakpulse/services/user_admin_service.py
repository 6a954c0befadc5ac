"""관리자용 사용자 관리 서비스."""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import UserNotFoundException, ValidationException
from peakpulse.models import User
from peakpulse.models.user import ALL_ROLES


class UserAdminService:
    @staticmethod
    def list_users(db: Session) -> list[User]:
        return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

    @staticmethod
    def update_roles(user_id: int, roles: list[str], db: Session) -> User:
        """
        사용자 역할을 변경합니다.

        Args:
            user_id: 사용자 ID
            roles: 새 역할 목록 (customer, vip, affiliate, admin 중 1개 이상)
            db: DB 세션

        Raises:
            ValidationException: 역할 목록이 비었거나 알 수 없는 역할이 있는 경우
            UserNotFoundException: 사용자가 없는 경우
        """
        normalized = list(dict.fromkeys(role.strip().lower() for role in roles if role.strip()))
        if not normalized:
            raise ValidationException("At least one role is required.")
        unknown = [role for role in normalized if role not in ALL_ROLES]
        if unknown:
            raise ValidationException(
                f"Unknown role(s): {', '.join(unknown)}. Allowed: {', '.join(ALL_ROLES)}"
            )

        user = db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFoundException(user_id)

        user.roles = normalized
        db.commit()
        db.refresh(user)
        logger.info("Roles updated for user {}: {}", user.email, normalized)
        return user
