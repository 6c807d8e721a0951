# virtual_art/client/uploads.py
import mimetypes
import os
from typing import Any, Dict, Optional

from virtual_art.client.api_client import ApiClient
from virtual_art.client.errors import ApiError, ValidationFailed
from virtual_art.client.events import EventBus, ArtworkUploaded
from virtual_art.client.navigation import Notifier
from virtual_art.utils.logging import get_logger

logger = get_logger(__name__)

ALLOWED_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


class ArtworkUploader:
    def __init__(self, api: ApiClient, bus: EventBus, notifier: Notifier):
        self.api = api
        self.bus = bus
        self.notifier = notifier

    @staticmethod
    def _content_type(path: str) -> str:
        content_type, _ = mimetypes.guess_type(path)
        if content_type not in ALLOWED_TYPES:
            raise ValidationFailed("Only image files are allowed")
        return content_type

    def upload(self, image_path: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            if not os.path.isfile(image_path):
                raise ValidationFailed("Please choose an image")
            if not fields.get("title") or not fields.get("category") or fields.get("price") in (None, ""):
                raise ValidationFailed("Title, category and price are required")
            content_type = self._content_type(image_path)
        except ValidationFailed as e:
            self.notifier.error(str(e))
            return None

        try:
            artwork = self.api.upload_artwork(image_path, fields, content_type=content_type)
        except ApiError as e:
            # 409 -> to samo zdjecie juz istnieje
            logger.error(f"Artwork upload failed: {e}")
            self.notifier.error(e.message)
            return None

        self.notifier.success("Artwork uploaded, waiting for approval")
        self.bus.publish(ArtworkUploaded(artwork_id=artwork.get("id")))
        return artwork
