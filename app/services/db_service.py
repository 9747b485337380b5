from supabase import create_async_client, AsyncClient
from app.core.config import Settings
from app.core.errors import StoreError
from typing import Any, Dict, List, Optional, Tuple
import itertools
import logging

logger = logging.getLogger("app")


class BookingStore:
    """
    Persistence for booking documents. Records are plain dicts with an
    integer `id` assigned by the store.
    """

    name = "base"

    async def connect(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    async def find_by_date(self, day: str) -> List[Dict[str, Any]]:
        raise NotImplementedError

    async def list_page(self, offset: int, limit: int) -> Tuple[List[Dict[str, Any]], int]:
        """Returns (records newest-first, total count)."""
        raise NotImplementedError

    async def delete(self, booking_id: int) -> None:
        raise NotImplementedError


class InMemoryBookingStore(BookingStore):
    """Process-local store for development and tests. Insertion order is id order."""

    name = "memory"

    def __init__(self):
        self._records: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(record, id=next(self._ids))
        self._records[stored["id"]] = stored
        return dict(stored)

    async def find_by_date(self, day: str) -> List[Dict[str, Any]]:
        return [dict(r) for r in self._records.values() if r["date"] == day]

    async def list_page(self, offset: int, limit: int) -> Tuple[List[Dict[str, Any]], int]:
        newest_first = list(reversed(list(self._records.values())))
        return [dict(r) for r in newest_first[offset:offset + limit]], len(newest_first)

    async def delete(self, booking_id: int) -> None:
        self._records.pop(booking_id, None)


class SupabaseBookingStore(BookingStore):
    name = "supabase"

    def __init__(self, url: str, key: str, table: str = "bookings"):
        self.url = url
        self.key = key
        self.table = table
        self._client: Optional[AsyncClient] = None

    async def connect(self) -> None:
        if not self.url or not self.key:
            raise StoreError("Supabase credentials missing (SUPABASE_URL / SUPABASE_KEY).")
        try:
            self._client = await create_async_client(self.url, self.key)
            logger.info("✅ Supabase Async client initialized")
        except Exception as e:
            logger.error(f"❌ Failed to initialize Supabase Async: {e}")
            raise StoreError(f"Failed to connect to Supabase: {e}") from e

    async def close(self) -> None:
        self._client = None
        logger.info("🔌 Supabase client released")

    def _bookings(self):
        if self._client is None:
            raise StoreError("Supabase store is not connected.")
        return self._client.table(self.table)

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(record)
        if data.get("created_at") is not None:
            data["created_at"] = data["created_at"].isoformat()
        try:
            response = await self._bookings().insert(data).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (insert): {e}")
            raise StoreError(str(e)) from e

        if not response.data:
            raise StoreError("Insert returned no data.")
        return response.data[0]

    async def find_by_date(self, day: str) -> List[Dict[str, Any]]:
        try:
            response = await self._bookings().select("*").eq("date", day).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (find_by_date): {e}")
            raise StoreError(str(e)) from e
        return response.data or []

    async def list_page(self, offset: int, limit: int) -> Tuple[List[Dict[str, Any]], int]:
        try:
            counted = await self._bookings().select("id", count="exact").limit(1).execute()
            total = counted.count or 0

            # PostgREST rejects a range that starts past the last row
            if offset >= total:
                return [], total

            response = await self._bookings()\
                .select("*")\
                .order("id", desc=True)\
                .range(offset, offset + limit - 1)\
                .execute()
        except Exception as e:
            logger.error(f"❌ DB Error (list_page): {e}")
            raise StoreError(str(e)) from e

        return response.data or [], total

    async def delete(self, booking_id: int) -> None:
        try:
            await self._bookings().delete().eq("id", booking_id).execute()
        except Exception as e:
            logger.error(f"❌ DB Error (delete): {e}")
            raise StoreError(str(e)) from e


def create_store(settings: Settings) -> BookingStore:
    backend = settings.STORE_BACKEND.lower()
    if backend == "memory":
        return InMemoryBookingStore()
    if backend == "supabase":
        return SupabaseBookingStore(settings.SUPABASE_URL, settings.SUPABASE_KEY, settings.BOOKINGS_TABLE)
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")
