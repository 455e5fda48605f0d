"""
core/data/inventory/services/dynamodb.py - DynamoDB provider

ListTables + DescribeTable.
"""

from __future__ import annotations

from ..types import TableDescription
from .base import ServiceProvider


class DynamoDBProvider(ServiceProvider):
    """DynamoDB table list/describe facade"""

    service = "dynamodb"

    def list_tables(self) -> list[str]:
        """Return every table name in the region"""
        return list(self._paginate("list_tables", "TableNames"))

    def describe_table(self, table_name: str) -> TableDescription:
        """Fetch size, creation date and billing mode of one table

        Args:
            table_name: DynamoDB table name

        Returns:
            TableDescription fragment
        """
        table = self._call("describe_table", resource_id=table_name, TableName=table_name).get("Table", {})
        return TableDescription(
            created_date=table.get("CreationDateTime"),
            size_bytes=table.get("TableSizeBytes"),
            pricing_model=table.get("BillingModeSummary"),
        )
