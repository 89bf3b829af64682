"""
File-based storage for proofreading records.

Each record is written to ``<records_dir>/<record_id>.json``.
"""

import os
import json
import time
import random
import string
import logging
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_record_id() -> str:
    """Millisecond timestamp plus a 9-character base36 suffix."""
    suffix = ''.join(random.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}_{suffix}"


class RecordStore:
    """Save and load proofreading records as JSON files."""

    def __init__(self, records_dir: str = 'records'):
        self.records_dir = records_dir
        os.makedirs(self.records_dir, exist_ok=True)

    def _path(self, record_id: str) -> Optional[str]:
        # Record ids never contain path separators; reject anything that does
        if not record_id or os.path.basename(record_id) != record_id or record_id.startswith('.'):
            return None
        return os.path.join(self.records_dir, f"{record_id}.json")

    def save_record(self, record: Dict[str, Any]) -> str:
        """
        Save a proofreading record.

        Args:
            record: Record fields (originalText, correctedText, analysis, timestamp)

        Returns:
            The generated record ID
        """
        record_id = generate_record_id()
        record_with_id = {'id': record_id, **record}

        with open(self._path(record_id), 'w', encoding='utf-8') as f:
            json.dump(record_with_id, f, indent=2, ensure_ascii=False)

        logger.debug(f"Saved record {record_id}")
        return record_id

    def get_record(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Get a record by ID, or None if it does not exist or cannot be read."""
        path = self._path(record_id)
        if path is None or not os.path.exists(path):
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read record {record_id}: {e}")
            return None

    def get_all_records(self) -> List[Dict[str, Any]]:
        """Get all readable records, newest first."""
        if not os.path.isdir(self.records_dir):
            return []

        records = []
        for filename in os.listdir(self.records_dir):
            if not filename.endswith('.json'):
                continue
            record = self.get_record(filename[:-len('.json')])
            if record is not None:
                records.append(record)

        records.sort(key=lambda r: r.get('timestamp', ''), reverse=True)
        return records

    def delete_record(self, record_id: str) -> bool:
        """Delete a record. Returns False if it did not exist."""
        path = self._path(record_id)
        if path is None:
            return False

        try:
            os.remove(path)
        except FileNotFoundError:
            return False

        logger.info(f"Deleted record {record_id}")
        return True
