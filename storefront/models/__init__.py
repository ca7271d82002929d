# Import all models to register them with SQLModel
from storefront.models.collection import (
    CollectionItem,
    CollectionItemBase,
    CollectionItemCreate,
    CartItem,
    WishlistItem,
)

__all__ = [
    "CollectionItem",
    "CollectionItemBase",
    "CollectionItemCreate",
    "CartItem",
    "WishlistItem",
]
