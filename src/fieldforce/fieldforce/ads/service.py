from __future__ import annotations

from typing import Optional

from werkzeug.datastructures import FileStorage

from ..storage.blob_router import BlobPlacementRouter
from .model import CreateAdRequest
from .repository import AdRepository


class AdService:
    def __init__(self, ads: AdRepository, blobs: BlobPlacementRouter):
        self._ads = ads
        self._blobs = blobs

    def list_active(self):
        return self._ads.list_active()

    def create_ad(self, req: CreateAdRequest, image: Optional[FileStorage]) -> None:
        with self._blobs.staged({"ad_image": image}) as stored:
            self._ads.create(title=req.title, image=stored["ad_image"])

    def toggle(self, ad_id: int) -> None:
        self._ads.toggle(ad_id)

    def delete_ad(self, ad_id: int) -> None:
        self._ads.delete_by_id(ad_id)
