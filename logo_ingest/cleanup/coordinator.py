from dataclasses import dataclass
from pathlib import Path

from logo_ingest.logging.logger import Log
from logo_ingest.registry.exceptions import RegistryWriteError
from logo_ingest.registry.store import RegistryStore


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of the post-run cleanup. A failed step never stops the other."""

    registry_error: str | None = None
    deleted: int = 0
    failed: int = 0
    total: int = 0

    @property
    def ok(self) -> bool:
        return self.registry_error is None and self.failed == 0

    @property
    def error_message(self) -> str | None:
        if self.failed:
            return f"Failed to delete {self.failed} out of {self.total} files"
        return self.registry_error


class CleanupCoordinator:
    """Persists the registry and removes source files of completed images."""

    def __init__(
        self,
        registry: RegistryStore,
        banks_file_path: Path,
        placeholder_icon_url: str,
    ) -> None:
        self._registry = registry
        self._banks_file_path = banks_file_path
        self._placeholder_icon_url = placeholder_icon_url

    def run(self, completed: list[str], directory: Path) -> CleanupResult:
        Log.info("Starting cleanup...")
        registry_error = self._persist_registry()
        deleted, failed = self._delete_images(completed, directory)
        result = CleanupResult(
            registry_error=registry_error,
            deleted=deleted,
            failed=failed,
            total=len(completed),
        )
        if result.ok:
            Log.info("Cleanup completed successfully")
        return result

    def _persist_registry(self) -> str | None:
        if not self._registry.has_changes:
            Log.info("No icon changes, registry left untouched")
            return None
        try:
            self._registry.save(self._banks_file_path, self._placeholder_icon_url)
        except RegistryWriteError as exc:
            Log.error(str(exc))
            return str(exc)
        return None

    def _delete_images(self, completed: list[str], directory: Path) -> tuple[int, int]:
        if not completed:
            Log.info("No images to delete")
            return 0, 0

        Log.info(f"Deleting {len(completed)} processed images...")
        deleted = 0
        failed = 0
        for name in completed:
            path = directory / name
            try:
                path.unlink()
            except OSError as exc:
                failed += 1
                Log.error(f"Failed to delete {path.name}: {exc}")
                continue
            deleted += 1
            Log.info(f"Deleted: {path.name}")

        Log.info(f"Successfully deleted: {deleted} files")
        return deleted, failed
