"""Excel 儲存層的錯誤類型"""


class StoreError(Exception):
    """所有儲存層錯誤的基底"""


class StoreValidationError(StoreError):
    """必要欄位缺少或為空"""


class ConflictError(StoreError):
    """key 重複"""


class NotFoundError(StoreError):
    """找不到資料列、品項或檔案"""


class StorageError(StoreError):
    """檔案讀寫失敗或格式錯誤"""
