from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from peakpulse.api.routes import (
    account,
    auth,
    cart,
    catalog,
    community,
    content,
    design,
    orders,
    payments,
    reviews,
)
from peakpulse.api.routes.admin import accounting as admin_accounting
from peakpulse.api.routes.admin import catalog as admin_catalog
from peakpulse.api.routes.admin import content as admin_content
from peakpulse.api.routes.admin import design as admin_design
from peakpulse.api.routes.admin import moderation as admin_moderation
from peakpulse.api.routes.admin import orders as admin_orders
from peakpulse.api.routes.admin import payments as admin_payments
from peakpulse.api.routes.admin import users as admin_users
from peakpulse.core.config import get_settings
from peakpulse.core.logging_config import configure_logging
from peakpulse.db.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings)
    init_db()
    logger.info("Peak Pulse API started (env={})", settings.app_env)
    yield
    logger.info("Peak Pulse API shutting down")


app = FastAPI(
    title="Peak Pulse API",
    description="Peak Pulse 의류 쇼핑몰 및 관리자 백오피스 API (Redis 기반 재고 락)",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """처리되지 않은 예외는 로그를 남기고 500으로 응답"""
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# 라우터 등록
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(account.router, prefix="/api/account", tags=["account"])
app.include_router(catalog.router, prefix="/api", tags=["catalog"])
app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
app.include_router(orders.router, prefix="/api/orders", tags=["orders"])
app.include_router(reviews.router, prefix="/api/reviews", tags=["reviews"])
app.include_router(community.router, prefix="/api/user-posts", tags=["community"])
app.include_router(content.router, prefix="/api", tags=["content"])
app.include_router(design.router, prefix="/api", tags=["design"])
app.include_router(payments.router, prefix="/api", tags=["payments"])

# 관리자 라우터 (모두 admin 역할 필요)
app.include_router(admin_catalog.router, prefix="/api/admin", tags=["admin: catalog"])
app.include_router(admin_orders.router, prefix="/api/admin", tags=["admin: orders"])
app.include_router(admin_moderation.router, prefix="/api/admin", tags=["admin: moderation"])
app.include_router(admin_content.router, prefix="/api/admin", tags=["admin: content"])
app.include_router(admin_design.router, prefix="/api/admin", tags=["admin: design"])
app.include_router(admin_payments.router, prefix="/api/admin", tags=["admin: payments"])
app.include_router(admin_accounting.router, prefix="/api/admin", tags=["admin: accounting"])
app.include_router(admin_users.router, prefix="/api/admin", tags=["admin: users"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Peak Pulse API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트 (Docker 헬스체크용)"""
    return {"status": "healthy"}
