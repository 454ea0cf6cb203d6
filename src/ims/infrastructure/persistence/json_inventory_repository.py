"""JSON-file-backed implementation of InventoryRepository."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ims.domain.exceptions import StorageUnavailableError, ValidationError
from ims.domain.model.inventory import InventoryRecord
from ims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class JsonInventoryRepository(InventoryRepository):
    """Stores records as a JSON array, one object per SKU.

    Any failure to read or parse the file surfaces as
    StorageUnavailableError.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    def exists_by_sku_code_and_quantity_at_least(
        self, sku_code: str, quantity: int
    ) -> bool:
        record = self.get_by_sku_code(sku_code)
        return record is not None and record.has_at_least(quantity)

    def get_by_sku_code(self, sku_code: str) -> InventoryRecord | None:
        for raw in self._load_raw():
            if raw.get("sku_code") == sku_code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[InventoryRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, record: InventoryRecord) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw.get("sku_code") == record.sku_code:
                records[i] = self._to_raw(record)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(record))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return {
            "sku_code": record.sku_code,
            "quantity": record.quantity,
        }

    def _to_domain(self, raw: dict) -> InventoryRecord:
        try:
            return InventoryRecord(sku_code=raw["sku_code"], quantity=raw["quantity"])
        except (KeyError, ValidationError) as exc:
            raise StorageUnavailableError(
                f"Malformed inventory record in {self._file_path}: {raw!r}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot read inventory file {self._file_path}: {exc}"
            ) from exc
        except ValueError as exc:
            raise StorageUnavailableError(
                f"Inventory file {self._file_path} is not valid JSON"
            ) from exc
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise StorageUnavailableError(
                f"Inventory file {self._file_path} must hold a list of objects"
            )
        self._check_unique_skus(records)
        return records

    def _check_unique_skus(self, records: list[dict]) -> None:
        seen: set[str] = set()
        for raw in records:
            sku_code = raw.get("sku_code")
            # non-string SKUs are reported by _to_domain
            if not isinstance(sku_code, str):
                continue
            if sku_code in seen:
                raise StorageUnavailableError(
                    f"Duplicate inventory record for SKU '{sku_code}' "
                    f"in {self._file_path}"
                )
            seen.add(sku_code)

    def _persist_raw(self, records: list[dict]) -> None:
        """Write records to a sibling temp file, then swap it into place.

        Readers see either the old file or the new one, never a partial write.
        """
        tmp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(json.dumps(records, indent=2) + "\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageUnavailableError(
                f"Cannot write inventory file {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot create inventory file {self._file_path}: {exc}"
            ) from exc
        self._persist_raw([])
        logger.info("Created empty inventory file at %s", self._file_path)
