from typing import List, Type
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from storefront.core.exceptions import ItemNotFound, data_layer_errors
from storefront.db.schema import SchemaProvisioner, get_provisioner
from storefront.db.session import get_session
from storefront.models.collection import CartItem, CollectionItem, CollectionItemCreate, WishlistItem
from storefront.services.collection import CollectionStore


def build_collection_router(
    model: Type[CollectionItem],
    label: str,
    add_path: str,
    base_path: str,
    fetch_all_error: str,
) -> APIRouter:
    """Routes for one owner-scoped collection (add, list, list by owner, delete)."""
    router = APIRouter()

    def get_store(
        session: Session = Depends(get_session),
        provisioner: SchemaProvisioner = Depends(get_provisioner),
    ) -> CollectionStore:
        return CollectionStore(session, model, label=label, provisioner=provisioner)

    @router.post(add_path, status_code=status.HTTP_201_CREATED)
    def add_item(item: CollectionItemCreate, store: CollectionStore = Depends(get_store)):
        with data_layer_errors("Failed to add product"):
            added_id = store.insert_if_absent(item)
        return {"message": "Product added successfully", "addedID": added_id}

    @router.get(base_path, response_model=List[model])
    def read_items(store: CollectionStore = Depends(get_store)):
        with data_layer_errors(fetch_all_error):
            return store.list_all()

    @router.get(base_path + "/{user_email}", response_model=List[model])
    def read_owner_items(user_email: str, store: CollectionStore = Depends(get_store)):
        with data_layer_errors("Failed to fetch items for the user"):
            return store.list_by_owner(user_email)

    @router.delete(base_path + "/{item_id}")
    def delete_item(item_id: str, store: CollectionStore = Depends(get_store)):
        # A non-numeric id cannot match any row
        try:
            row_id = int(item_id)
        except ValueError:
            raise ItemNotFound(item_id)
        with data_layer_errors("Failed to delete item"):
            deleted_id = store.delete_by_id(row_id)
        return {"message": "Item deleted successfully", "id": deleted_id}

    return router


cart_router = build_collection_router(
    CartItem,
    label="cart",
    add_path="/add-product",
    base_path="/added-items",
    fetch_all_error="Failed to fetch added items",
)

wishlist_router = build_collection_router(
    WishlistItem,
    label="wishlist",
    add_path="/wishlist",
    base_path="/wishlist",
    fetch_all_error="Failed to fetch wishlist items",
)
