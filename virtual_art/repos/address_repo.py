# virtual_art/repos/address_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from virtual_art.data.models.address import AddressModel


class AddressRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: int) -> List[AddressModel]:
        return list(
            self.db.execute(
                select(AddressModel).where(AddressModel.user_id == user_id).order_by(AddressModel.id)
            ).scalars()
        )

    def get_owned(self, address_id: int, user_id: int) -> AddressModel | None:
        return self.db.execute(
            select(AddressModel).where(AddressModel.id == address_id, AddressModel.user_id == user_id)
        ).scalar_one_or_none()

    def save(self, address: AddressModel) -> AddressModel:
        self.db.add(address)
        self.db.commit()
        self.db.refresh(address)
        return address

    def delete(self, address: AddressModel):
        self.db.delete(address)
        self.db.commit()
