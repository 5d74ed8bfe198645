from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import os
import logging

from foodfest.config import get_settings
from foodfest.routers import menu, orders

settings = get_settings()

# 設定 logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"訂單檔案：{os.path.abspath(settings.orders_file)}")
    logger.info(f"菜單檔案：{os.path.abspath(settings.menu_file)}")
    if not os.path.exists(settings.menu_file):
        logger.warning("菜單檔案不存在，可執行 python -m scripts.seed_menu 建立")
    yield
    # Shutdown


app = FastAPI(
    title=settings.app_name,
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} 格式錯誤：{exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# Routers
app.include_router(orders.router, tags=["orders"])
app.include_router(menu.router, tags=["menu"])

# Static files（放在 API 之後，避免蓋掉路由）
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


def run():
    import uvicorn
    logger.info(f"FoodFest server running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
