import asyncio

from app.core.config import settings
from app.core.logger import setup_logging, logger
from app.services.db_service import SupabaseBookingStore

setup_logging()

async def verify_supabase():
    """Connects with the configured credentials and reads one page of bookings."""
    store = SupabaseBookingStore(settings.SUPABASE_URL, settings.SUPABASE_KEY, settings.BOOKINGS_TABLE)
    await store.connect()
    try:
        records, total = await store.list_page(0, 5)
        logger.info(f"✅ Table '{settings.BOOKINGS_TABLE}' reachable, {total} bookings stored.")
        for record in records:
            logger.info(f"   #{record['id']} {record['date']} {record['time']} ({record['hours']}h) {record['name']}")
    finally:
        await store.close()

if __name__ == "__main__":
    asyncio.run(verify_supabase())
