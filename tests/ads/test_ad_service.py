from __future__ import annotations

import pytest

from src.fieldforce.fieldforce.ads.model import CreateAdRequest
from src.fieldforce.fieldforce.ads.service import AdService
from src.fieldforce.fieldforce.core.exceptions import MissingData


def test_two_toggles_restore_active_state(fakes, blobs):
    svc = AdService(fakes.ads, blobs)
    svc.create_ad(CreateAdRequest(title="Summer sale"), None)

    svc.toggle(1)
    assert svc.list_active() == []
    svc.toggle(1)
    assert [a["title"] for a in svc.list_active()] == ["Summer sale"]


def test_active_ads_newest_first(fakes, blobs):
    svc = AdService(fakes.ads, blobs)
    svc.create_ad(CreateAdRequest(title="old"), None)
    svc.create_ad(CreateAdRequest(title="new"), None)

    assert [a["title"] for a in svc.list_active()] == ["new", "old"]


def test_title_is_required():
    with pytest.raises(MissingData):
        CreateAdRequest.from_payload({"title": "  "})
