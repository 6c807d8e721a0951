# virtual_art/services/address_service.py
from typing import Dict, Any, List

from sqlalchemy.orm import Session

from virtual_art.data.models.user import UserModel
from virtual_art.data.models.address import AddressModel
from virtual_art.domain.schemas import AddressIn, AddressUpdate
from virtual_art.domain.serializers import address_dict
from virtual_art.repos.address_repo import AddressRepo
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)


class AddressService:
    def __init__(self, db: Session):
        self.repo = AddressRepo(db)

    def list_addresses(self, actor: UserModel) -> List[Dict[str, Any]]:
        return [address_dict(a) for a in self.repo.list_for_user(actor.id)]

    def add_address(self, actor: UserModel, payload: AddressIn) -> Dict[str, Any]:
        address = self.repo.save(AddressModel(user_id=actor.id, **payload.model_dump()))
        logger.info(f"Address {address.id} added for user {actor.id}")
        return address_dict(address)

    def update_address(self, actor: UserModel, address_id: int, payload: AddressUpdate) -> Dict[str, Any]:
        address = self.repo.get_owned(address_id, actor.id)
        if not address:
            raise LookupError("Address not found")

        for field, value in payload.model_dump().items():
            setattr(address, field, value)

        return address_dict(self.repo.save(address))

    def delete_address(self, actor: UserModel, address_id: int):
        address = self.repo.get_owned(address_id, actor.id)
        if not address:
            raise LookupError("Address not found")
        self.repo.delete(address)
