"""Tests for storyreel.editor.assets."""

from conftest import make_descriptor

from storyreel.editor import AssetStore, ConfirmationGate
from storyreel.models import AssetKind
from storyreel.services import LocatorAllocator


class TestAdd:
    def test_image_gets_thumbnail(self, assets, image_file):
        asset = assets.add(image_file)
        assert asset.kind == AssetKind.IMAGE
        assert asset.thumbnail == asset.url
        assert asset.name == "cover.png"
        assert asset.size == 16

    def test_video_has_no_thumbnail(self, assets, video_file):
        asset = assets.add(video_file)
        assert asset.kind == AssetKind.VIDEO
        assert asset.thumbnail is None

    def test_other_types_are_audio(self, assets):
        for mime_type in ("audio/wav", "application/pdf", ""):
            asset = assets.add(make_descriptor("x", mime_type))
            assert asset.kind == AssetKind.AUDIO
            assert asset.thumbnail is None

    def test_uses_given_empty_allocator(self, assets, locators):
        assert len(locators) == 0
        assert assets.locators is locators

    def test_allocates_locator(self, assets, locators, audio_file):
        asset = assets.add(audio_file)
        assert asset.url in locators
        assert locators.resolve(asset.url).data == audio_file.data

    def test_ids_and_urls_unique(self, locators, image_file):
        store = AssetStore(locators)
        first = store.add(image_file)
        second = store.add(image_file)
        assert first.id != second.id
        assert first.url != second.url

    def test_by_kind(self, assets, image_file, video_file, audio_file):
        assets.add(image_file)
        assets.add(video_file)
        assets.add(audio_file)
        assets.add(image_file)
        assert [a.name for a in assets.by_kind(AssetKind.IMAGE)] == ["cover.png", "cover.png"]
        assert len(assets.by_kind(AssetKind.AUDIO)) == 1


class TestDelete:
    def test_delete_removes_from_library(self, assets, image_file):
        asset = assets.add(image_file)
        assert assets.delete(asset.id) is True
        assert assets.get(asset.id) is None
        assert len(assets) == 0

    def test_unknown_id(self, assets):
        assert assets.delete("ghost") is False

    def test_locator_kept_by_default(self, assets, locators, image_file):
        asset = assets.add(image_file)
        assets.delete(asset.id)
        assert asset.url in locators

    def test_locator_released_when_configured(self, image_file):
        locators = LocatorAllocator()
        store = AssetStore(locators, release_on_delete=True)
        asset = store.add(image_file)
        store.delete(asset.id)
        assert asset.url not in locators

    def test_request_delete_is_gated(self, assets, image_file):
        gate = ConfirmationGate()
        asset = assets.add(image_file)
        pending = assets.request_delete(asset.id, gate)
        assert pending.title == "Delete Asset"
        assert len(assets) == 1
        gate.confirm()
        assert len(assets) == 0

    def test_clear(self, assets, image_file, audio_file):
        assets.add(image_file)
        assets.add(audio_file)
        assets.clear()
        assert len(assets) == 0
