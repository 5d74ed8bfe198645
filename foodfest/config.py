from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # App
    app_name: str = "FoodFest 點餐系統"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Excel 儲存檔案
    orders_file: str = "orders-log.xlsx"
    menu_file: str = "menu.xlsx"

    # 前端靜態檔（目錄存在才掛載）
    static_dir: str = "public"

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()
