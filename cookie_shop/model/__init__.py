# ------ cookie_shop/model/__init__.py ------

from .user import User
from .cookie import Cookie
from .package_option import PackageOption
from .types import JSONText

__all__ = [
    "User",
    "Cookie",
    "PackageOption",
    "JSONText",
]
