"""Excel 讀寫服務"""
import os
import logging
from io import BytesIO
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils.exceptions import InvalidFileException

from foodfest.services.exceptions import StorageError

logger = logging.getLogger("excel")

_LOAD_ERRORS = (OSError, BadZipFile, InvalidFileException, KeyError)


def read_rows(path: str) -> list[list] | None:
    """讀取第一個工作表的所有列，檔案不存在回傳 None"""
    if not os.path.exists(path):
        return None

    try:
        wb = load_workbook(path, data_only=True)
        ws = wb.worksheets[0]
        rows = [
            ["" if value is None else value for value in row]
            for row in ws.iter_rows(min_row=1, min_col=1, values_only=True)
        ]
    except _LOAD_ERRORS as e:
        raise StorageError(f"無法讀取 {path}: {e}") from e
    except IndexError as e:
        raise StorageError(f"{path} 沒有任何工作表") from e

    return rows


def write_rows(path: str, title: str, rows: list[list]) -> None:
    """以單一工作表覆寫整個檔案"""
    wb = Workbook()
    ws = wb.active
    ws.title = title

    for row_idx, row in enumerate(rows, 1):
        for col, value in enumerate(row, 1):
            set_cell(ws.cell(row=row_idx, column=col), value)

    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        wb.save(path)
    except OSError as e:
        raise StorageError(f"無法寫入 {path}: {e}") from e

    logger.debug(f"寫入 {path}：{len(rows)} 列")


def clean_text(value: str) -> str:
    """移除 Excel 不接受的控制字元"""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def set_cell(cell, value) -> None:
    """寫入儲存格，字串一律存成文字（= 開頭也不當公式）"""
    if isinstance(value, str):
        cell.value = clean_text(value)
        cell.data_type = "s"
    else:
        cell.value = value


def is_blank_row(row: list) -> bool:
    return all(value == "" or value is None for value in row)


def export_orders_to_excel(headers: list, rows: list[list]) -> BytesIO:
    """匯出訂單為有格式的 Excel"""
    wb = Workbook()
    ws = wb.active
    ws.title = "Orders"

    # 樣式
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="F97316", end_color="F97316", fill_type="solid")
    header_alignment = Alignment(horizontal="center", vertical="center")
    thin_border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    # 表頭
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col)
        set_cell(cell, header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_alignment
        cell.border = thin_border

    # 訂單資料
    for row_idx, row in enumerate(rows, 2):
        for col, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col)
            set_cell(cell, value)
            cell.border = thin_border

    # 調整欄寬
    column_widths = [10, 16, 50, 10, 16, 18]
    for i, width in enumerate(column_widths, 1):
        ws.column_dimensions[get_column_letter(i)].width = width

    # 儲存到 BytesIO
    output = BytesIO()
    wb.save(output)
    output.seek(0)

    return output
