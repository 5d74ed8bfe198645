from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MenuMeta(_CamelModel):
    """攤位資訊（每個菜單檔只有一筆）"""
    stall_name: str = ""
    fest_name: str = ""


class MenuItem(_CamelModel):
    key: str
    emoji: str = ""
    name: str = ""
    description: str = ""
    max_price: int | float = 0


class MenuDocument(_CamelModel):
    """整份菜單：攤位資訊 + 品項"""
    meta: MenuMeta
    items: list[MenuItem] = []


class MenuItemCreate(_CamelModel):
    key: str | None = None
    emoji: str | None = None
    name: str | None = None
    description: str | None = None
    max_price: Any = None


class MenuItemUpdate(_CamelModel):
    """部分更新：只有有帶的欄位會被覆蓋（model_fields_set）"""
    emoji: str | None = None
    name: str | None = None
    description: str | None = None
    max_price: Any = None


class MenuMetaUpdate(_CamelModel):
    stall_name: str | None = None
    fest_name: str | None = None
