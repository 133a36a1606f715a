# receipt_points/store/repository.py
import threading
import uuid
from typing import Dict, Protocol

from ..errors import ReceiptNotFound


class ScoreStore(Protocol):
    def put(self, points: int) -> str: ...

    def get(self, receipt_id: str) -> int: ...


class InMemoryScoreStore:
    """
    Process-lifetime id -> points map. Records are written once and never
    changed or removed; all access goes through one lock.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, points: int) -> str:
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._points:
                receipt_id = str(uuid.uuid4())
            self._points[receipt_id] = points
        return receipt_id

    def get(self, receipt_id: str) -> int:
        with self._lock:
            points = self._points.get(receipt_id)
        if points is None:
            raise ReceiptNotFound()
        return points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
