from typing import Any, Dict, List

from sqlalchemy import text
from sqlmodel import Session


class ProductCatalog:
    """Read-only view of the externally managed ``products`` table."""

    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[Dict[str, Any]]:
        rows = self.session.execute(text("SELECT * FROM products")).mappings().all()
        return [dict(row) for row in rows]
