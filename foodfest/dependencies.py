from fastapi import Depends

from foodfest.config import Settings, get_settings
from foodfest.services.menu_store import MenuStore
from foodfest.services.order_store import OrderStore


def get_order_store(settings: Settings = Depends(get_settings)) -> OrderStore:
    return OrderStore(settings.orders_file)


def get_menu_store(settings: Settings = Depends(get_settings)) -> MenuStore:
    return MenuStore(settings.menu_file)
