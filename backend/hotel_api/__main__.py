"""
python -m hotel_api 启动服务
"""
import uvicorn

from hotel_api.config import settings


def main():
    uvicorn.run(
        "hotel_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
