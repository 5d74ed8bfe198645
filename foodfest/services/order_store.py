"""訂單 Excel 儲存

整份檔案讀入 → 記憶體中修改 → 整份覆寫。
訂單編號 = 現有最大編號 + 1（空檔案從 1 開始）。
"""
import math
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from foodfest.schemas.order import LineItem, OrderCreate, OrderReceipt, OrderTable
from foodfest.services import excel_service
from foodfest.services.exceptions import NotFoundError

logger = logging.getLogger("orders")

SHEET_TITLE = "Orders"
ORDER_HEADERS = ["Order ID", "Name", "Items", "Total", "Date Time", "IP"]


@dataclass
class RequestContext:
    """計算下單 IP 需要的請求資訊"""
    forwarded_for: str | None = None
    remote_addr: str | None = None

    def client_ip(self) -> str:
        if self.forwarded_for:
            return self.forwarded_for.split(",")[0].strip()
        return self.remote_addr or "Unknown"


def format_number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def unit_price(item: LineItem):
    """單價 = 總價 / 數量（四捨五入），數量為 0 時直接用總價"""
    if item.qty:
        return math.floor(item.price / item.qty + 0.5)
    return item.price


def summarize_items(items: list[LineItem]) -> str:
    """品項摘要：Tea x2 @ Rs20 (Rs40); ..."""
    return "; ".join(
        f"{item.name} x{format_number(item.qty)} @ Rs{format_number(unit_price(item))} (Rs{format_number(item.price)})"
        for item in items
    )


def format_display_time(ordered_at: datetime) -> str:
    """DD-MM-YY, HH:MM（本地時間）"""
    return ordered_at.astimezone().strftime("%d-%m-%y, %H:%M")


def to_iso(dt: datetime) -> str:
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_order_id(value) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class OrderStore:
    def __init__(self, path: str):
        self.path = path

    def _load_data_rows(self) -> tuple[list, list[list]]:
        """回傳（表頭, 非空白資料列）"""
        rows = excel_service.read_rows(self.path)
        if not rows:
            return list(ORDER_HEADERS), []

        header = list(rows[0])
        while header and header[-1] == "":
            header.pop()
        if not header:
            header = list(ORDER_HEADERS)
        data = [row for row in rows[1:] if not excel_service.is_blank_row(row)]
        return header, data

    def _save(self, data: list[list]) -> None:
        excel_service.write_rows(self.path, SHEET_TITLE, [ORDER_HEADERS, *data])

    def next_order_id(self, data: list[list]) -> int:
        ids = [parse_order_id(row[0]) for row in data if row]
        ids = [i for i in ids if i is not None]
        return max(ids) + 1 if ids else 1

    def append(self, order: OrderCreate, context: RequestContext) -> OrderReceipt:
        """新增一筆訂單"""
        _, data = self._load_data_rows()
        order_id = self.next_order_id(data)

        if order.ordered_at is not None:
            ordered_at = order.ordered_at_datetime()
            ordered_at_iso = order.ordered_at
        else:
            ordered_at = datetime.now(timezone.utc)
            ordered_at_iso = to_iso(ordered_at)

        ip = order.client_ip or context.client_ip()

        new_row = [
            order_id,
            order.name or "Guest",
            summarize_items(order.items),
            order.total_price or 0,
            format_display_time(ordered_at),
            ip,
        ]
        data.append(new_row)
        self._save(data)

        logger.info(f"新增訂單 #{order_id}：{new_row[1]}，{len(order.items)} 項，IP={ip}")
        return OrderReceipt(order_id=order_id, ordered_at=ordered_at_iso, ip=ip)

    def list_all(self) -> OrderTable:
        """列出所有訂單（依寫入順序）"""
        header, data = self._load_data_rows()
        return OrderTable(headers=[str(h) for h in header], rows=data)

    def delete_one(self, order_id) -> None:
        """刪除指定編號的訂單（以字串比對）"""
        _, data = self._load_data_rows()
        target = str(order_id)
        remaining = [row for row in data if str(row[0]) != target]

        if len(remaining) == len(data):
            raise NotFoundError(f"找不到訂單 {order_id}")

        self._save(remaining)
        logger.info(f"刪除訂單 #{order_id}（{len(data) - len(remaining)} 列）")

    def delete_all(self) -> None:
        """清空訂單，只保留表頭"""
        self._save([])
        logger.info("清空所有訂單")
