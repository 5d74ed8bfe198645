from datetime import datetime
from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

_datetime_adapter = TypeAdapter(datetime)


class LineItem(BaseModel):
    """單一品項（僅輸入用，存檔時攤平成文字）"""
    name: str = ""
    qty: int | float = 0
    price: int | float = 0


class OrderCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    items: list[LineItem] = []
    total_price: int | float | None = None
    # 保留原字串，回傳時原樣帶回
    ordered_at: str | None = None
    client_ip: str | None = None

    @field_validator("ordered_at")
    @classmethod
    def check_ordered_at(cls, value: str | None) -> str | None:
        if not value:
            return None
        _datetime_adapter.validate_python(value)
        return value

    def ordered_at_datetime(self) -> datetime | None:
        if self.ordered_at is None:
            return None
        return _datetime_adapter.validate_python(self.ordered_at)


class OrderReceipt(BaseModel):
    """新增訂單的結果"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: int
    ordered_at: str
    ip: str


class OrderTable(BaseModel):
    headers: list[str]
    rows: list[list]
