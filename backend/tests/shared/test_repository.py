"""Tests for shared/repository.py."""

from typing import Optional
from unittest.mock import MagicMock

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_client_and_table(self):
        mock_db = MagicMock()
        repo = BaseRepository(mock_db, "developers")
        assert repo._db is mock_db
        assert repo._table == "developers"

    def test_query_targets_table(self):
        """_query should start a query on the repository's table."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db, "developers")

        query = repo._query()

        mock_db.table.assert_called_once_with("developers")
        assert query is mock_db.table.return_value

    def test_subclass_queries_through_helper(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            {"id": "dev-1", "plan": "free"}
        ]

        class PlanRepository(BaseRepository[dict]):
            def get_plan(self, developer_id: str) -> Optional[str]:
                result = self._query().select("plan").eq("id", developer_id).execute()
                return result.data[0]["plan"] if result.data else None

        repo = PlanRepository(mock_db, "devs")

        assert repo.get_plan("dev-1") == "free"
        mock_db.table.assert_called_once_with("devs")
