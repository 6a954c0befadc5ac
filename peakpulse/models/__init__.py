"""
SQLAlchemy 데이터베이스 모델

모든 데이터베이스 모델을 이 모듈에서 import하여 export합니다.
"""

from peakpulse.models.user import User, WishlistItem
from peakpulse.models.catalog import Category, Product, ProductVariant
from peakpulse.models.review import Review
from peakpulse.models.order import Order, OrderItem
from peakpulse.models.community import UserPost, PostLike, PostBookmark, PostComment
from peakpulse.models.content import SiteConfiguration, PromotionalPost, NewsletterSubscription
from peakpulse.models.design import (
    DesignCollaborationCategory,
    DesignCollaboration,
    PrintOnDemandDesign,
)
from peakpulse.models.payment import PaymentGatewaySetting
from peakpulse.models.accounting import Loan

__all__ = [
    "User",
    "WishlistItem",
    "Category",
    "Product",
    "ProductVariant",
    "Review",
    "Order",
    "OrderItem",
    "UserPost",
    "PostLike",
    "PostBookmark",
    "PostComment",
    "SiteConfiguration",
    "PromotionalPost",
    "NewsletterSubscription",
    "DesignCollaborationCategory",
    "DesignCollaboration",
    "PrintOnDemandDesign",
    "PaymentGatewaySetting",
    "Loan",
]
