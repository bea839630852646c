# models/__init__.py

from models import business_info

# __all__ 지정해서 다른 곳에서 import * 할 때도 안전하게
__all__ = [
    "business_info",
]
