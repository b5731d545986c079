"""
Developer billing record store.

Provides both in-memory (for testing) and Supabase-backed (for production)
implementations of the partial-update interface the reconciler writes
through. Both treat an update that matches no row as a no-op.
"""

import logging
from typing import Any, Optional

from supabase import Client

from shared.repository import BaseRepository
from .models import BillingRecordUpdate, DeveloperBillingRecord

logger = logging.getLogger(__name__)

# Record field -> developers table column
_COLUMNS = {
    "billing_customer_id": "stripe_customer_id",
    "billing_subscription_id": "stripe_subscription_id",
}
_FIELDS = {column: field for field, column in _COLUMNS.items()}

EVENT_AT_COLUMN = "billing_event_at"


def _is_stale(record: DeveloperBillingRecord, event_created: Optional[int]) -> bool:
    return (
        event_created is not None
        and record.billing_event_at is not None
        and record.billing_event_at > event_created
    )


class DeveloperBillingRepository:
    """
    Developer billing records held in memory.

    For testing and local development. Use
    SupabaseDeveloperBillingRepository for production.
    """

    def __init__(self, records: Optional[list[DeveloperBillingRecord]] = None):
        self._records: dict[str, DeveloperBillingRecord] = {}
        for record in records or []:
            self.add(record)

    def add(self, record: DeveloperBillingRecord) -> None:
        """Insert or replace a record."""
        self._records[record.id] = record

    def get(self, developer_id: str) -> Optional[DeveloperBillingRecord]:
        return self._records.get(developer_id)

    def get_by_customer_id(self, customer_id: str) -> Optional[DeveloperBillingRecord]:
        for record in self._records.values():
            if record.billing_customer_id == customer_id:
                return record
        return None

    def update_by_customer_id(
        self,
        customer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        matches = [r for r in self._records.values() if r.billing_customer_id == customer_id]
        return self._apply(matches, update, event_created)

    def update_by_developer_id(
        self,
        developer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        record = self._records.get(developer_id)
        return self._apply([record] if record else [], update, event_created)

    def _apply(
        self,
        records: list[DeveloperBillingRecord],
        update: BillingRecordUpdate,
        event_created: Optional[int],
    ) -> bool:
        changes = update.changes()
        if event_created is not None:
            changes["billing_event_at"] = event_created

        updated = False
        for record in records:
            if _is_stale(record, event_created):
                continue
            self._records[record.id] = DeveloperBillingRecord.model_validate(
                {**record.model_dump(), **changes}
            )
            updated = True
        return updated


class SupabaseDeveloperBillingRepository(BaseRepository[DeveloperBillingRecord]):
    """
    Developer billing records in the Supabase developers table.

    Each update is a single PostgREST PATCH filtered on one column, which
    Supabase applies atomically. Client errors (network, PostgREST) are
    not caught here.
    """

    def __init__(self, db: Client, table: str = "developers") -> None:
        super().__init__(db, table)

    def get_by_customer_id(self, customer_id: str) -> Optional[DeveloperBillingRecord]:
        result = (
            self._query()
            .select("*")
            .eq(_COLUMNS["billing_customer_id"], customer_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def update_by_customer_id(
        self,
        customer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        return self._update(_COLUMNS["billing_customer_id"], customer_id, update, event_created)

    def update_by_developer_id(
        self,
        developer_id: str,
        update: BillingRecordUpdate,
        event_created: Optional[int] = None,
    ) -> bool:
        return self._update("id", developer_id, update, event_created)

    def _update(
        self,
        column: str,
        value: str,
        update: BillingRecordUpdate,
        event_created: Optional[int],
    ) -> bool:
        row = self._to_row(update.changes())
        if event_created is not None:
            row[EVENT_AT_COLUMN] = event_created

        query = self._query().update(row).eq(column, value)
        if event_created is not None:
            query = query.or_(
                f"{EVENT_AT_COLUMN}.is.null,{EVENT_AT_COLUMN}.lte.{event_created}"
            )
        result = query.execute()

        if not result.data:
            logger.debug(f"No {self._table} row matched {column}={value}")
            return False
        return True

    @staticmethod
    def _to_row(changes: dict[str, Any]) -> dict[str, Any]:
        """Map record field names to table columns."""
        return {_COLUMNS.get(field, field): value for field, value in changes.items()}

    def _map_to_record(self, data: dict[str, Any]) -> DeveloperBillingRecord:
        """Map database row to DeveloperBillingRecord model."""
        fields = {_FIELDS.get(column, column): value for column, value in data.items()}
        return DeveloperBillingRecord(
            id=str(fields["id"]),
            billing_customer_id=fields.get("billing_customer_id"),
            billing_subscription_id=fields.get("billing_subscription_id"),
            plan=fields.get("plan") or "free",
            plan_status=fields.get("plan_status"),
            billing_event_at=fields.get(EVENT_AT_COLUMN),
        )
