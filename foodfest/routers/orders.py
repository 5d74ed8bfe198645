from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import StreamingResponse
import logging

from foodfest.dependencies import get_order_store
from foodfest.schemas.order import OrderCreate
from foodfest.services.excel_service import export_orders_to_excel
from foodfest.services.exceptions import NotFoundError, StorageError
from foodfest.services.order_store import OrderStore, RequestContext

router = APIRouter()
logger = logging.getLogger("orders")


@router.post("/api/orders")
async def create_order(
    payload: OrderCreate,
    request: Request,
    store: OrderStore = Depends(get_order_store),
):
    """送出訂單"""
    if not payload.items:
        raise HTTPException(status_code=400, detail="No items provided")

    context = RequestContext(
        forwarded_for=request.headers.get("x-forwarded-for"),
        remote_addr=request.client.host if request.client else None,
    )

    try:
        receipt = store.append(payload, context)
    except StorageError:
        logger.exception("Failed to append order")
        raise HTTPException(status_code=500, detail="Failed to record order")

    return {"ok": True, **receipt.model_dump(by_alias=True)}


@router.get("/api/orders")
async def list_orders(store: OrderStore = Depends(get_order_store)):
    """訂單列表"""
    try:
        table = store.list_all()
    except StorageError:
        logger.exception("Failed to read orders")
        raise HTTPException(status_code=500, detail="Failed to read orders")

    return table.model_dump()


@router.get("/api/orders/export")
async def export_orders(store: OrderStore = Depends(get_order_store)):
    """下載訂單 Excel"""
    try:
        table = store.list_all()
    except StorageError:
        logger.exception("Failed to export orders")
        raise HTTPException(status_code=500, detail="Failed to export orders")

    output = export_orders_to_excel(table.headers, table.rows)
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": 'attachment; filename="orders.xlsx"'},
    )


@router.delete("/api/orders/{order_id}")
async def delete_order(order_id: str, store: OrderStore = Depends(get_order_store)):
    """刪除單筆訂單"""
    order_id = order_id.strip()
    if not order_id:
        raise HTTPException(status_code=400, detail="Order ID is required")

    try:
        store.delete_one(order_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")
    except StorageError:
        logger.exception(f"Failed to delete order {order_id}")
        raise HTTPException(status_code=500, detail="Failed to delete order")

    return {"ok": True, "deleted": order_id}


@router.delete("/api/orders")
async def clear_orders(store: OrderStore = Depends(get_order_store)):
    """清空所有訂單"""
    try:
        store.delete_all()
    except StorageError:
        logger.exception("Failed to clear orders")
        raise HTTPException(status_code=500, detail="Failed to clear orders")

    return {"ok": True, "cleared": True}
