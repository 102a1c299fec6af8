import sys

from tracker.app.core.config import settings
from tracker.app.core.exceptions import ParcelNotFoundError
from tracker.app.core.observability import configure_logging
from tracker.app.db.session import create_db_engine, init_db
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel
from tracker.app.services.parcel_store import ParcelStore

DATABASE_URL = settings.database_url


def open_store():
    engine = create_db_engine(DATABASE_URL)
    init_db(engine)
    return engine, ParcelStore(engine)


def run_verification():
    configure_logging(settings.log_level)

    # 1. First Session
    print(f"\n--- [Step 1] Opening Store at {DATABASE_URL} ---")
    engine, store = open_store()
    try:
        parcel = Parcel.register(client=1000, address="test")
        number = store.add(parcel)
        print(f"✅ Parcel Registered: number={number}")

        store.set_status(number, ParcelStatus.SENT)
        store.set_address(number, "new test address")
        print("✅ Status and Address Updated")
    finally:
        print("\n--- [Step 2] Closing Engine ---")
        engine.dispose()

    # 2. Second Session
    print("\n--- [Step 3] Reopening Store (Verification) ---")
    engine, store = open_store()
    try:
        stored = store.get(number)
        if (stored.status, stored.address, stored.created_at) != (
            ParcelStatus.SENT, "new test address", parcel.created_at
        ):
            print(f"❌ Parcel Changed Across Restart: {stored}")
            raise Exception("Persistence check failed")
        print(f"✅ Parcel Persisted: {stored.model_dump()}")

        print("\n--- [Step 4] Deleting Parcel ---")
        store.delete(number)
        try:
            store.get(number)
        except ParcelNotFoundError:
            print("✅ Parcel Deleted")
        else:
            raise Exception("Parcel still present after delete")
    finally:
        print("\n--- [Step 5] Closing Engine ---")
        engine.dispose()


if __name__ == "__main__":
    try:
        run_verification()
    except Exception as e:
        print(f"❌ Verification Failed: {e}")
        sys.exit(1)
