from __future__ import annotations

from typing import Optional, Protocol, Sequence


class AdRepository(Protocol):
    def list_active(self) -> Sequence[dict]:
        """Active ads, newest first."""
        raise NotImplementedError

    def create(self, *, title: str, image: Optional[str]) -> None:
        raise NotImplementedError

    def toggle(self, ad_id: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, ad_id: int) -> bool:
        raise NotImplementedError
