# virtual_art/api/routers/address.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import AddressIn, AddressUpdate, AddressOut
from virtual_art.services.address_service import AddressService

router = APIRouter(prefix="/address", tags=["address"])


def _out(address: dict) -> dict:
    return AddressOut(**address).model_dump(by_alias=True)


@router.get("/get")
def get_addresses(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"success": True, "addresses": [_out(a) for a in AddressService(db).list_addresses(user)]}


@router.post("/add")
def add_address(payload: AddressIn, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    address = AddressService(db).add_address(user, payload)
    return {"success": True, "message": "Address added successfully", "address": _out(address)}


@router.put("/update/{address_id}")
def update_address(
    address_id: int,
    payload: AddressUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        address = AddressService(db).update_address(user, address_id, payload)
    return {"success": True, "message": "Address updated successfully", "address": _out(address)}


@router.delete("/delete/{address_id}")
def delete_address(address_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        AddressService(db).delete_address(user, address_id)
    return {"success": True, "message": "Address deleted successfully"}
