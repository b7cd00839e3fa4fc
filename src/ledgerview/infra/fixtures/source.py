"""Bundled offline transaction set for demos and tests."""

import json
import logging
from pathlib import Path

from ledgerview.domain.models.transaction import TransactionRecord

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_PATH = Path(__file__).with_name("transactions.json")


class FixtureSource:
    """Serves a static, pre-seeded list of transactions read from a JSON file."""

    def __init__(self, path: Path | str = DEFAULT_FIXTURE_PATH) -> None:
        self._path = Path(path)
        self._records: list[TransactionRecord] | None = None

    def get_all_fixture_transactions(self) -> list[TransactionRecord]:
        if self._records is None:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            self._records = [TransactionRecord.model_validate(item) for item in raw]
            logger.info("Loaded %d fixture transactions from %s", len(self._records), self._path)
        return list(self._records)
