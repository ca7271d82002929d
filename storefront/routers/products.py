from typing import Any, Dict, List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from storefront.core.exceptions import data_layer_errors
from storefront.db.session import get_session
from storefront.services.catalog import ProductCatalog

router = APIRouter()

def get_catalog(session: Session = Depends(get_session)) -> ProductCatalog:
    return ProductCatalog(session)

@router.get("/products")
def read_products(catalog: ProductCatalog = Depends(get_catalog)) -> List[Dict[str, Any]]:
    with data_layer_errors("Failed to fetch products"):
        return catalog.list_all()
