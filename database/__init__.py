from .models import Base, AccessoryPrice
from .connection import get_session, init_db, session_scope
from .seed_data import seed_database

__all__ = [
    'Base', 'AccessoryPrice',
    'get_session', 'init_db', 'session_scope', 'seed_database'
]
