"""
Project Bolt 酒店管理 API 主应用入口
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_api import __version__
from hotel_api.config import settings
from hotel_api.database import init_db, SessionLocal
from hotel_api.routers import rooms, bookings, users, services, inventory, maintenance, analytics

logger = logging.getLogger(__name__)

# 路径 ID 无法解析时按资源返回 404
PATH_NOT_FOUND_MESSAGES = {
    "booking_id": "Booking not found",
    "room_id": "Room not found",
    "user_id": "User not found",
    "service_id": "Service request not found",
    "item_id": "Item not found",
    "task_id": "Task not found",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 初始化数据库
    init_db()

    # 注册事件处理器
    from hotel_api.services.event_handlers import register_event_handlers
    register_event_handlers()

    if settings.SEED_DEMO_DATA:
        from hotel_api.services.maintenance_service import seed_demo_tasks
        seed_db = SessionLocal()
        try:
            created = seed_demo_tasks(seed_db)
            if created:
                logger.info(f"Seeded {created} demo maintenance tasks")
        finally:
            seed_db.close()

    logger.info(f"{settings.APP_NAME} started")
    yield


# 创建应用
app = FastAPI(
    title=settings.APP_NAME,
    description="酒店房间、预订、住客、客房服务、库存与维修管理",
    version=__version__,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """统一错误体 {msg}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    for error in errors:
        loc = error.get("loc", ())
        if len(loc) >= 2 and loc[0] == "path" and loc[1] in PATH_NOT_FOUND_MESSAGES:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"msg": PATH_NOT_FOUND_MESSAGES[loc[1]]},
            )

    details = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        details.setdefault(field, error.get("msg", "Invalid value"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"msg": "Validation error", "details": details},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Server error"},
    )


# 注册路由
app.include_router(rooms.router)
app.include_router(bookings.router)
app.include_router(users.router)
app.include_router(services.router)
app.include_router(inventory.router)
app.include_router(maintenance.router)
app.include_router(analytics.router)


@app.get("/")
def root():
    """根路径"""
    return {"message": "Welcome to Project Bolt Hotel Management API"}


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}
