"""
Parcel store.

Sole gateway between the Parcel entity and the parcel table. Every operation
issues exactly one parameterized statement inside its own transaction, so
atomicity is whatever the backend gives a single statement.
"""

from contextlib import contextmanager
from typing import Iterator, List, Union

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from tracker.app.core.exceptions import ParcelNotFoundError, StorageError
from tracker.app.core.observability import observe
from tracker.app.models.parcel import parcel_table
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, LookupError) as exc:
        # LookupError: a stored status the enum does not know
        raise StorageError(operation, exc) from exc


class ParcelStore:
    """
    CRUD access to parcel rows over a caller-supplied engine.
    
    The engine is shared by all calls and is expected to be safe for
    concurrent use; the store adds no locking of its own.
    """
    
    def __init__(self, engine: Engine):
        self.engine = engine
    
    def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return its storage-assigned number.
        
        The parcel's own number is ignored.
        
        Raises:
            StorageError: If the insert cannot be completed
        """
        stmt = insert(parcel_table).values(
            client=parcel.client,
            status=ParcelStatus(parcel.status),
            address=parcel.address,
            created_at=parcel.created_at,
        )
        
        with observe("parcel.add", client=parcel.client) as log_data:
            with _storage_errors("add"), self.engine.begin() as conn:
                result = conn.execute(stmt)
                number = result.inserted_primary_key[0]
            log_data["number"] = number
        
        return number
    
    def get(self, number: int) -> Parcel:
        """
        Fetch one parcel by number.
        
        Raises:
            ParcelNotFoundError: If no row has this number
            StorageError: On any backend failure
        """
        stmt = select(parcel_table).where(parcel_table.c.number == number)
        
        with observe("parcel.get", number=number):
            with _storage_errors("get"), self.engine.connect() as conn:
                row = conn.execute(stmt).first()
        
        if row is None:
            raise ParcelNotFoundError(number)
        
        return self._scan(row)
    
    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Fetch every parcel belonging to a client.
        
        Returns an empty list when the client has none. Callers must not
        rely on the order of the result.
        """
        stmt = (
            select(parcel_table)
            .where(parcel_table.c.client == client)
            .order_by(parcel_table.c.number)
        )
        
        with observe("parcel.get_by_client", client=client) as log_data:
            with _storage_errors("get_by_client"), self.engine.connect() as conn:
                rows = conn.execute(stmt).all()
            log_data["count"] = len(rows)
        
        return [self._scan(row) for row in rows]
    
    def set_address(self, number: int, address: str) -> int:
        """
        Replace the address of a parcel; nothing else changes.
        
        A missing number is not an error. Returns the number of rows updated
        (0 or 1).
        """
        stmt = (
            update(parcel_table)
            .where(parcel_table.c.number == number)
            .values(address=address)
        )
        return self._execute_write("set_address", stmt, number)
    
    def set_status(self, number: int, status: Union[ParcelStatus, str]) -> int:
        """
        Replace the status of a parcel; nothing else changes.
        
        Any status may overwrite any other. A missing number is not an error.
        
        Raises:
            ValueError: If status is not a known ParcelStatus value
        """
        status = ParcelStatus(status)
        stmt = (
            update(parcel_table)
            .where(parcel_table.c.number == number)
            .values(status=status)
        )
        return self._execute_write("set_status", stmt, number)
    
    def delete(self, number: int) -> int:
        """Remove a parcel. Deleting a missing number is not an error."""
        stmt = delete(parcel_table).where(parcel_table.c.number == number)
        return self._execute_write("delete", stmt, number)
    
    def _execute_write(self, operation: str, stmt, number: int) -> int:
        with observe(f"parcel.{operation}", number=number) as log_data:
            with _storage_errors(operation), self.engine.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
            log_data["rowcount"] = rowcount
        return rowcount
    
    @staticmethod
    def _scan(row: Row) -> Parcel:
        return Parcel(
            number=row.number,
            client=row.client,
            status=row.status,
            address=row.address,
            created_at=row.created_at,
        )
