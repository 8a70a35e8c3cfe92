import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.db.common.settings import get_settings
from src.db.common.logging_config import setup_logging
from src.db.common.exceptions import LibraryError
from src.db.common.database_connection import init_database
from src.db.common.common_routes import router as common_router
from src.db.user.api.user_routes import router as user_router
from src.db.book.api.book_routes import router as book_router
from src.db.cart.api.cart_routes import router as cart_router
from src.db.booking.api.booking_routes import router as booking_router

logger = logging.getLogger("library")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cấu hình logging và tạo tables khi ứng dụng khởi động"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    init_database()
    logger.info("Library API ready")
    yield


async def library_error_handler(request: Request, exc: LibraryError):
    """Chuyển lỗi nghiệp vụ thành JSON response với status code tương ứng"""
    return JSONResponse({"detail": exc.message, "success": False}, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Body/param sai kiểu dữ liệu được coi là lỗi phía client (400)"""
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"detail": "Invalid request", "success": False}, status_code=400)


def create_app() -> FastAPI:
    """Tạo FastAPI app với middleware, exception handlers và routers"""
    settings = get_settings()

    app = FastAPI(
        title="Library Booking API",
        description="API đăng ký, đăng nhập, xem sách theo category, giỏ sách và đặt sách",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware để cho phép frontend truy cập
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LibraryError, library_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Root route
    @app.get("/")
    async def root():
        """Root endpoint trả về thông tin API"""
        return {
            "message": "Library Booking API",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "Users": ["/signup", "/login", "/profile/{email}"],
                "Books": ["/books/{category}"],
                "Cart": ["/cart/add", "/cart/{user_id}", "/cart/remove"],
                "Booking": ["/cart/book"],
                "Health": "/health",
            }
        }

    # Include routers từ các modules
    app.include_router(common_router, tags=["Health"])
    app.include_router(user_router, tags=["Users"])
    app.include_router(book_router, tags=["Books"])
    app.include_router(booking_router, tags=["Booking"])
    app.include_router(cart_router, tags=["Cart"])

    return app


app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )
