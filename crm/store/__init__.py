from crm.store.record_store import RecordStore
from crm.store.seed import load_seed

__all__ = ["RecordStore", "load_seed"]
