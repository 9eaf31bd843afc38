import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

from logo_ingest.cleanup.coordinator import CleanupCoordinator, CleanupResult
from logo_ingest.registry.exceptions import RegistryWriteError
from logo_ingest.registry.store import RegistryStore

PLACEHOLDER = "https://cdn.example.com/logo/default-image"


class TestCleanupResult:
    def test_ok_when_nothing_failed(self) -> None:
        result = CleanupResult(deleted=2, total=2)
        assert result.ok is True
        assert result.error_message is None

    def test_deletion_failure_message(self) -> None:
        result = CleanupResult(deleted=1, failed=1, total=2)
        assert result.ok is False
        assert result.error_message == "Failed to delete 1 out of 2 files"

    def test_registry_failure_message(self) -> None:
        result = CleanupResult(registry_error="Failed to write banks.json: denied")
        assert result.ok is False
        assert result.error_message == "Failed to write banks.json: denied"


class TestCleanupRun:
    def test_persists_registry_and_deletes_completed(
        self,
        registry: RegistryStore,
        tmp_path: Path,
        image_dir: Path,
        write_image: Callable[[str, int], Path],
    ) -> None:
        write_image("10.jpg", 2048)
        write_image("20.png", 2048)
        write_image("30.png", 2048)
        banks_path = tmp_path / "banks.json"
        registry.set_icon(1, "https://cdn.example.com/logo/77")

        result = CleanupCoordinator(registry, banks_path, PLACEHOLDER).run(
            ["10.jpg", "20.png"], image_dir
        )

        assert result == CleanupResult(deleted=2, failed=0, total=2)
        assert sorted(p.name for p in image_dir.iterdir()) == ["30.png"]
        saved = json.loads(banks_path.read_text(encoding="utf-8"))
        assert saved[2]["icon"] == PLACEHOLDER
        assert saved[1]["icon"] == "https://cdn.example.com/logo/77"

    def test_partial_deletion_failure_is_reported_not_raised(
        self,
        registry: RegistryStore,
        tmp_path: Path,
        image_dir: Path,
        write_image: Callable[[str, int], Path],
    ) -> None:
        write_image("10.jpg", 2048)

        result = CleanupCoordinator(registry, tmp_path / "banks.json", PLACEHOLDER).run(
            ["20.png", "10.jpg"], image_dir
        )

        assert result.deleted == 1
        assert result.failed == 1
        assert result.error_message == "Failed to delete 1 out of 2 files"
        assert not (image_dir / "10.jpg").exists()

    def test_no_completed_images_is_a_no_op(
        self, registry: RegistryStore, tmp_path: Path, image_dir: Path
    ) -> None:
        with patch("logo_ingest.cleanup.coordinator.Log") as mock_log:
            result = CleanupCoordinator(registry, tmp_path / "banks.json", PLACEHOLDER).run(
                [], image_dir
            )

        assert result.ok is True
        assert result.total == 0
        mock_log.info.assert_any_call("No images to delete")

    def test_registry_write_failure_does_not_block_deletion(
        self,
        image_dir: Path,
        tmp_path: Path,
        write_image: Callable[[str, int], Path],
    ) -> None:
        write_image("10.jpg", 2048)
        registry = MagicMock(spec=RegistryStore)
        registry.has_changes = True
        registry.save.side_effect = RegistryWriteError("Failed to write banks.json: denied")

        result = CleanupCoordinator(registry, tmp_path / "banks.json", PLACEHOLDER).run(
            ["10.jpg"], image_dir
        )

        assert result.registry_error == "Failed to write banks.json: denied"
        assert result.deleted == 1
        assert result.ok is False
        assert not (image_dir / "10.jpg").exists()

    def test_saves_with_placeholder_icon(self, tmp_path: Path, image_dir: Path) -> None:
        registry = MagicMock(spec=RegistryStore)
        registry.has_changes = True
        banks_path = tmp_path / "banks.json"

        CleanupCoordinator(registry, banks_path, PLACEHOLDER).run([], image_dir)

        registry.save.assert_called_once_with(banks_path, PLACEHOLDER)

    def test_unchanged_registry_is_not_written(self, tmp_path: Path, image_dir: Path) -> None:
        registry = MagicMock(spec=RegistryStore)
        registry.has_changes = False

        result = CleanupCoordinator(registry, tmp_path / "banks.json", PLACEHOLDER).run(
            [], image_dir
        )

        assert result.ok is True
        registry.save.assert_not_called()

    def test_loaded_registry_without_uploads_keeps_file_bytes(
        self, banks_file: Path, image_dir: Path
    ) -> None:
        before = banks_file.read_bytes()
        registry = RegistryStore.load(banks_file)

        CleanupCoordinator(registry, banks_file, PLACEHOLDER).run([], image_dir)

        assert banks_file.read_bytes() == before
