from fastapi import APIRouter, Depends, HTTPException
import logging

from foodfest.dependencies import get_menu_store
from foodfest.schemas.menu import MenuItemCreate, MenuItemUpdate, MenuMetaUpdate
from foodfest.services.exceptions import (
    ConflictError, NotFoundError, StorageError, StoreValidationError,
)
from foodfest.services.menu_store import MenuStore

router = APIRouter()
logger = logging.getLogger("menu")


@router.get("/api/menu")
async def get_menu(store: MenuStore = Depends(get_menu_store)):
    """菜單（攤位資訊 + 品項）"""
    try:
        document = store.list_all()
    except (NotFoundError, StorageError):
        # 菜單檔不存在也算伺服器錯誤，不回傳空菜單
        logger.exception("Failed to load menu")
        raise HTTPException(status_code=500, detail="Failed to load menu")

    return document.model_dump(by_alias=True)


@router.put("/api/menu")
async def update_menu_meta(payload: MenuMetaUpdate, store: MenuStore = Depends(get_menu_store)):
    """更新攤位名稱 / 活動名稱"""
    try:
        meta = store.update_meta(payload)
    except StorageError:
        logger.exception("Failed to update menu meta")
        raise HTTPException(status_code=500, detail="Failed to update menu")

    return {"ok": True, "meta": meta.model_dump(by_alias=True)}


@router.post("/api/menu", status_code=201)
async def create_menu_item(payload: MenuItemCreate, store: MenuStore = Depends(get_menu_store)):
    """新增品項"""
    try:
        item = store.create(payload)
    except StoreValidationError:
        raise HTTPException(status_code=400, detail="Menu item key is required")
    except ConflictError:
        raise HTTPException(status_code=409, detail="Menu item already exists")
    except StorageError:
        logger.exception("Failed to create menu item")
        raise HTTPException(status_code=500, detail="Failed to save menu item")

    return {"ok": True, "item": item.model_dump(by_alias=True)}


@router.put("/api/menu/{key}")
async def update_menu_item(
    key: str,
    payload: MenuItemUpdate,
    store: MenuStore = Depends(get_menu_store),
):
    """更新品項（部分欄位）"""
    try:
        item = store.update(key, payload)
    except StoreValidationError:
        raise HTTPException(status_code=400, detail="Menu item key is required")
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Menu item not found")
    except StorageError:
        logger.exception(f"Failed to update menu item {key}")
        raise HTTPException(status_code=500, detail="Failed to update menu item")

    return {"ok": True, "item": item.model_dump(by_alias=True)}


@router.delete("/api/menu/{key}")
async def delete_menu_item(key: str, store: MenuStore = Depends(get_menu_store)):
    """刪除品項"""
    try:
        store.delete(key)
    except StoreValidationError:
        raise HTTPException(status_code=400, detail="Menu item key is required")
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Menu item not found")
    except StorageError:
        logger.exception(f"Failed to delete menu item {key}")
        raise HTTPException(status_code=500, detail="Failed to delete menu item")

    return {"ok": True, "deleted": key.strip()}
