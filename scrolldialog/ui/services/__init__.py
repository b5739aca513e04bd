from .icon_service import STOCK_ICONS, get_stock_icon, get_stock_pixmap, stock_pixmap_kind

__all__ = [
    'STOCK_ICONS',
    'get_stock_icon',
    'get_stock_pixmap',
    'stock_pixmap_kind'
]
