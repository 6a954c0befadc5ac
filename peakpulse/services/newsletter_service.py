"""뉴스레터 구독 서비스."""

from loguru import logger
from sqlalchemy.orm import Session

from peakpulse.core.exceptions import ValidationException
from peakpulse.models import NewsletterSubscription


class NewsletterService:
    @staticmethod
    def subscribe(email: str, db: Session, source: str | None = None) -> tuple[bool, str]:
        """
        뉴스레터를 구독합니다.

        이메일은 공백 제거 후 소문자로 저장합니다. 이미 구독 중인 이메일이면
        구독을 다시 활성화하고 created=False를 반환합니다.

        Returns:
            (created, message)

        Raises:
            ValidationException: 이메일 형식이 잘못된 경우
        """
        normalized = (email or "").strip().lower()
        if "@" not in normalized:
            raise ValidationException("Invalid email address.")

        existing = (
            db.query(NewsletterSubscription)
            .filter(NewsletterSubscription.email == normalized)
            .first()
        )
        if existing is not None:
            if not existing.is_active:
                existing.is_active = True
                db.commit()
            return False, "You are already subscribed! Thank you."

        db.add(
            NewsletterSubscription(
                email=normalized, source=source or "unknown", is_active=True
            )
        )
        db.commit()
        logger.info("Newsletter subscription: {} (source={})", normalized, source or "unknown")
        return True, "Successfully subscribed to the newsletter!"
