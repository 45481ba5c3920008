from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class BaseRepository:
    """Data access for one entity type, bound to a single session.

    Every write commits. A failed write rolls the session back before the
    error propagates so the connection goes back to the pool clean.
    """

    model = None

    def __init__(self, db: Session):
        self.db = db

    def save(self, obj):
        self.db.add(obj)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def delete_by_id(self, pk: int) -> int:
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.id == pk)
                .delete()
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return deleted

    def find_all(self) -> list:
        return self.db.query(self.model).order_by(self.model.id.asc()).all()

    def find_by_id(self, pk: int):
        return self.db.get(self.model, pk)
