"""매출 데이터 조회 서비스 (세무 보고용 참고 자료)."""

from collections import Counter
from datetime import date, datetime, time

from sqlalchemy.orm import Session

from peakpulse.core.exceptions import ValidationException
from peakpulse.models import Order


class SalesReportService:
    @staticmethod
    def get_sales_data(start_date: date, end_date: date, db: Session) -> dict:
        """
        기간 내 주문과 요약 정보를 반환합니다.

        end_date는 해당 일의 23:59:59.999999까지 포함합니다.

        Args:
            start_date: 시작일
            end_date: 종료일
            db: DB 세션

        Returns:
            {
                "start_date": date,
                "end_date": date,
                "orders": [Order, ...],  # 최신순
                "summary": {
                    "order_count": int,
                    "gross_sales": int,
                    "shipping_collected": int,
                    "by_status": {"Processing": 2, ...},
                    "by_payment_method": {"cod": 1, ...}
                }
            }

        Raises:
            ValidationException: start_date가 end_date보다 늦은 경우
        """
        if start_date > end_date:
            raise ValidationException("start_date must be on or before end_date.")

        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date, time.max)

        orders = (
            db.query(Order)
            .filter(Order.created_at >= start, Order.created_at <= end)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .all()
        )

        summary = {
            "order_count": len(orders),
            "gross_sales": sum(order.total_amount for order in orders),
            "shipping_collected": sum(order.shipping_cost for order in orders),
            "by_status": dict(Counter(order.status for order in orders)),
            "by_payment_method": dict(Counter(order.payment_method for order in orders)),
        }
        return {
            "start_date": start_date,
            "end_date": end_date,
            "orders": orders,
            "summary": summary,
        }
