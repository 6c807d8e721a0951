# virtual_art/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from virtual_art.data.models.order import OrderModel
from virtual_art.data.models.order_item import OrderItemModel
from virtual_art.data.models.artwork import ArtworkModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders(self) -> List[OrderModel]:
        return list(self.db.execute(select(OrderModel).order_by(OrderModel.order_date.desc())).scalars())

    def list_for_user(self, user_id: int) -> List[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.order_date.desc())
            ).scalars()
        )

    def list_for_artist(self, artist_id: int) -> List[OrderModel]:
        # zamowienia zawierajace przynajmniej jedno dzielo artysty
        return list(
            self.db.execute(
                select(OrderModel)
                .join(OrderItemModel, OrderItemModel.order_id == OrderModel.id)
                .join(ArtworkModel, ArtworkModel.id == OrderItemModel.product_id)
                .where(ArtworkModel.artist_id == artist_id)
                .distinct()
                .order_by(OrderModel.order_date.desc())
            ).scalars()
        )

    def has_completed_purchase(self, user_id: int, artwork_id: int) -> bool:
        row = self.db.execute(
            select(OrderModel.id)
            .join(OrderItemModel, OrderItemModel.order_id == OrderModel.id)
            .where(
                OrderModel.user_id == user_id,
                OrderModel.status == "completed",
                OrderItemModel.product_id == artwork_id,
            )
            .limit(1)
        ).first()
        return row is not None

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def delete(self, order: OrderModel):
        self.db.delete(order)
        self.db.commit()
