# virtual_art/api/routers/artworks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from virtual_art.api.deps import get_current_user
from virtual_art.api.errors import translate_errors
from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.domain.schemas import ArtworkIn, ArtworkUpdate, ArtworkOut
from virtual_art.services.artwork_service import ArtworkService

router = APIRouter(prefix="/artworks", tags=["artworks"])


@router.get("/", response_model=List[ArtworkOut])
def list_artworks(
    status: Optional[str] = None,
    category: Optional[str] = None,
    artist_id: Optional[int] = None,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ArtworkService(db).list_artworks(user, status=status, category=category, artist_id=artist_id)


@router.get("/my-artworks", response_model=List[ArtworkOut])
def my_artworks(user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return ArtworkService(db).list_my_artworks(user)


@router.post("/upload", response_model=ArtworkOut, status_code=201)
async def upload_artwork(
    image: UploadFile = File(...),
    title: str = Form(...),
    category: str = Form(...),
    price: float = Form(...),
    description: Optional[str] = Form(None),
    medium: Optional[str] = Form(None),
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    content = await image.read()
    with translate_errors():
        # image_url zostanie nadpisany sciezka zapisanego pliku
        payload = ArtworkIn(
            title=title,
            category=category,
            price=price,
            description=description,
            medium=medium,
            image_url=image.filename or "upload",
        )
        return ArtworkService(db).upload_artwork(user, payload, content, image.content_type or "")


@router.get("/{artwork_id}", response_model=ArtworkOut)
def get_artwork(artwork_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return ArtworkService(db).get_artwork(user, artwork_id)


@router.post("/", response_model=ArtworkOut, status_code=201)
def create_artwork(payload: ArtworkIn, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        return ArtworkService(db).create_artwork(user, payload)


@router.put("/{artwork_id}", response_model=ArtworkOut)
def update_artwork(
    artwork_id: int,
    payload: ArtworkUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    with translate_errors():
        return ArtworkService(db).update_artwork(user, artwork_id, payload)


@router.delete("/{artwork_id}")
def delete_artwork(artwork_id: int, user: UserModel = Depends(get_current_user), db: Session = Depends(get_db)):
    with translate_errors():
        ArtworkService(db).delete_artwork(user, artwork_id)
    return {"message": "Artwork deleted successfully"}
