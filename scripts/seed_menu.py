"""
建立初始菜單檔
執行方式: python -m scripts.seed_menu [--force]
"""
import os
import argparse

from foodfest.config import get_settings
from foodfest.schemas.menu import MenuDocument, MenuItem, MenuMeta
from foodfest.services.menu_store import MenuStore

SEED_MENU = MenuDocument(
    meta=MenuMeta(stall_name="Chai Corner", fest_name="FoodFest"),
    items=[
        MenuItem(key="tea", emoji="☕", name="Masala Tea", description="Hot spiced milk tea", max_price=20),
        MenuItem(key="samosa", emoji="🥟", name="Samosa", description="Potato and pea filling", max_price=15),
        MenuItem(key="vada-pav", emoji="🍔", name="Vada Pav", description="Spicy potato fritter in a bun", max_price=30),
        MenuItem(key="lassi", emoji="🥛", name="Sweet Lassi", description="Chilled yogurt drink", max_price=40),
    ],
)


def seed(path: str, force: bool = False) -> bool:
    if os.path.exists(path) and not force:
        print(f"⚠️ {path} 已存在，跳過種子（加上 --force 覆寫）")
        return False

    MenuStore(path).write(SEED_MENU)
    print(f"✅ 建立菜單：{path}，{len(SEED_MENU.items)} 個品項")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="建立初始菜單檔")
    parser.add_argument("--path", default=get_settings().menu_file)
    parser.add_argument("--force", action="store_true")
    args = parser.parse_args()
    seed(args.path, force=args.force)
