"""菜單 Excel 儲存

檔案格式：
- 第 1 列：攤位名稱、活動名稱
- 第 2 列：欄位名稱（不分大小寫，依名稱找欄位）
- 第 3 列起：品項
"""
import math
import logging

from foodfest.schemas.menu import (
    MenuDocument, MenuItem, MenuItemCreate, MenuItemUpdate, MenuMeta, MenuMetaUpdate,
)
from foodfest.services import excel_service
from foodfest.services.exceptions import ConflictError, NotFoundError, StoreValidationError

logger = logging.getLogger("menu")

SHEET_TITLE = "Menu"
MENU_HEADERS = ["Key", "Emoji", "Name", "Description", "MaxPrice"]


def parse_price(value) -> int | float:
    """轉成數字，無法轉換時為 0"""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(str(value).strip()) if not isinstance(value, (int, float)) else float(value)
    except (ValueError, OverflowError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def _cell_text(value) -> str:
    return "" if value is None else str(value)


class MenuStore:
    def __init__(self, path: str):
        self.path = path

    def _parse(self, rows: list[list]) -> MenuDocument:
        meta_row = rows[0] if rows else []
        meta = MenuMeta(
            stall_name=_cell_text(meta_row[0]) if len(meta_row) > 0 else "",
            fest_name=_cell_text(meta_row[1]) if len(meta_row) > 1 else "",
        )

        if len(rows) < 2:
            return MenuDocument(meta=meta, items=[])

        # 欄位名稱 → 欄位索引（同名取第一個）
        columns = {}
        for idx, header in enumerate(rows[1]):
            name = _cell_text(header).strip().lower()
            if name and name not in columns:
                columns[name] = idx

        def field(row, name):
            idx = columns.get(name)
            if idx is None or idx >= len(row):
                return ""
            return row[idx]

        items = []
        for row in rows[2:]:
            key = _cell_text(field(row, "key")).strip()
            if not key:
                continue
            items.append(MenuItem(
                key=key,
                emoji=_cell_text(field(row, "emoji")),
                name=_cell_text(field(row, "name")),
                description=_cell_text(field(row, "description")),
                max_price=parse_price(field(row, "maxprice")),
            ))

        return MenuDocument(meta=meta, items=items)

    def _load(self) -> MenuDocument:
        rows = excel_service.read_rows(self.path)
        if rows is None:
            raise NotFoundError(f"菜單檔案不存在：{self.path}")
        return self._parse(rows)

    def _load_or_empty(self) -> MenuDocument:
        """寫入前讀取；檔案不存在時視為空菜單"""
        rows = excel_service.read_rows(self.path)
        if rows is None:
            return MenuDocument(meta=MenuMeta(), items=[])
        return self._parse(rows)

    def write(self, document: MenuDocument) -> None:
        """整份覆寫：攤位資訊、欄位名稱、所有品項"""
        rows = [
            [document.meta.stall_name, document.meta.fest_name],
            list(MENU_HEADERS),
        ]
        for item in document.items:
            rows.append([item.key, item.emoji, item.name, item.description, item.max_price])
        excel_service.write_rows(self.path, SHEET_TITLE, rows)

    def list_all(self) -> MenuDocument:
        """讀取整份菜單"""
        return self._load()

    def create(self, data: MenuItemCreate) -> MenuItem:
        """新增品項，key 重複時不覆蓋"""
        key = excel_service.clean_text(data.key or "").strip()
        if not key:
            raise StoreValidationError("Menu item key is required")

        document = self._load_or_empty()
        if any(item.key == key for item in document.items):
            raise ConflictError(f"品項已存在：{key}")

        item = MenuItem(
            key=key,
            emoji=excel_service.clean_text(data.emoji or ""),
            name=excel_service.clean_text(data.name or ""),
            description=excel_service.clean_text(data.description or ""),
            max_price=parse_price(data.max_price),
        )
        document.items.append(item)
        self.write(document)

        logger.info(f"新增品項：{key}")
        return item

    def update(self, key: str, patch: MenuItemUpdate) -> MenuItem:
        """部分更新品項，沒帶或為 null 的欄位保留原值"""
        key = (key or "").strip()
        if not key:
            raise StoreValidationError("Menu item key is required")

        document = self._load_or_empty()
        for idx, item in enumerate(document.items):
            if item.key == key:
                break
        else:
            raise NotFoundError(f"找不到品項：{key}")

        changes = {}
        for field in ("emoji", "name", "description"):
            value = getattr(patch, field)
            if field in patch.model_fields_set and value is not None:
                changes[field] = excel_service.clean_text(value)
        if "max_price" in patch.model_fields_set and patch.max_price is not None:
            changes["max_price"] = parse_price(patch.max_price)

        updated = item.model_copy(update=changes)
        document.items[idx] = updated
        self.write(document)

        logger.info(f"更新品項：{key}，欄位={sorted(changes)}")
        return updated

    def delete(self, key: str) -> None:
        """刪除品項"""
        key = (key or "").strip()
        if not key:
            raise StoreValidationError("Menu item key is required")

        document = self._load_or_empty()
        remaining = [item for item in document.items if item.key != key]
        if len(remaining) == len(document.items):
            raise NotFoundError(f"找不到品項：{key}")

        document.items = remaining
        self.write(document)
        logger.info(f"刪除品項：{key}")

    def update_meta(self, patch: MenuMetaUpdate) -> MenuMeta:
        """更新攤位名稱 / 活動名稱"""
        document = self._load_or_empty()

        changes = {
            field: excel_service.clean_text(getattr(patch, field))
            for field in ("stall_name", "fest_name")
            if field in patch.model_fields_set and getattr(patch, field) is not None
        }
        document.meta = document.meta.model_copy(update=changes)
        self.write(document)

        logger.info(f"更新攤位資訊：{document.meta.stall_name} / {document.meta.fest_name}")
        return document.meta
