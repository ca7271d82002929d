import logging
from typing import List, Optional, Type

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from storefront.core.exceptions import DuplicateItem, ItemNotFound
from storefront.db.schema import SchemaProvisioner
from storefront.models.collection import CollectionItem, CollectionItemCreate

logger = logging.getLogger(__name__)


class CollectionStore:
    """
    Owner-scoped collection of products with a duplicate guard.

    One instance per request, bound to a table model (cart or wishlist).
    A (addedID, userEmail) pair is stored at most once per table.
    """

    def __init__(
        self,
        session: Session,
        model: Type[CollectionItem],
        label: str,
        provisioner: Optional[SchemaProvisioner] = None,
    ):
        self.session = session
        self.model = model
        self.label = label
        self.provisioner = provisioner

    def list_all(self) -> List[CollectionItem]:
        return self.session.exec(select(self.model).order_by(self.model.id)).all()

    def list_by_owner(self, user_email: str) -> List[CollectionItem]:
        return self.session.exec(
            select(self.model)
            .where(self.model.userEmail == user_email)
            .order_by(self.model.id)
        ).all()

    def find(self, added_id: int, user_email: str) -> Optional[CollectionItem]:
        return self.session.exec(
            select(self.model).where(
                self.model.addedID == added_id,
                self.model.userEmail == user_email,
            )
        ).first()

    def insert_if_absent(self, item: CollectionItemCreate) -> int:
        """Insert the item unless its owner already has that product. Returns addedID."""
        if self.provisioner is not None:
            self.provisioner.ensure_table(self.model)

        if self.find(item.addedID, item.userEmail):
            raise self._duplicate(item.addedID)

        row = self.model(**item.model_dump())
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent insert of the same pair
            self.session.rollback()
            if self.find(item.addedID, item.userEmail):
                raise self._duplicate(item.addedID)
            raise
        return item.addedID

    def delete_by_id(self, item_id: int) -> int:
        result = self.session.execute(delete(self.model).where(self.model.id == item_id))
        self.session.commit()
        if result.rowcount == 0:
            raise ItemNotFound(item_id)
        return item_id

    def _duplicate(self, added_id: int) -> DuplicateItem:
        logger.info("Rejected duplicate addedID=%s in %s", added_id, self.model.__tablename__)
        return DuplicateItem(
            added_id, message=f"This product is already added to your {self.label}."
        )
