"""
DataTable Mixin for consistent table setup and row selection handling.

Provides reusable methods for:
- _configure_table(): Apply configuration to a DataTable
- _setup_table(): Configure DataTable with columns and common settings
- _get_selected_row_key(): Safely extract row key from RowSelected events

Usage:
    class MyScreen(DataTableMixin, Screen):
        def compose(self):
            yield DataTable(id="my-table")

        def on_mount(self):
            self._setup_table("my-table", [
                ("Name", 30),
                ("Value", 20),
            ])
"""

from __future__ import annotations

from textual.widgets import DataTable


class DataTableMixin:
    """Mixin providing consistent DataTable setup and row selection handling."""

    def _configure_table(
        self,
        table: DataTable,
        columns: list[tuple[str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = True,
    ) -> None:
        """Apply configuration to a DataTable.

        Args:
            table: The DataTable instance to configure.
            columns: List of (column_name, width) tuples. Width can be None.
            cursor_type: Cursor type ('row', 'cell', or 'none').
            zebra_stripes: Whether to enable zebra striping.
        """
        table.cursor_type = cursor_type
        table.zebra_stripes = zebra_stripes
        for name, width in columns:
            table.add_column(name, width=width)

    def _setup_table(
        self,
        table_id: str,
        columns: list[tuple[str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = True,
    ) -> DataTable:
        """Set up a DataTable with consistent configuration.

        Returns:
            The configured DataTable instance.
        """
        table = self.query_one(f"#{table_id}", DataTable)
        self._configure_table(
            table, columns, cursor_type=cursor_type, zebra_stripes=zebra_stripes
        )
        return table

    def _get_selected_row_key(self, event: DataTable.RowSelected) -> str | None:
        """Extract the row key from a RowSelected event as a string."""
        row_key = event.row_key
        if row_key is None or row_key.value is None:
            return None
        return str(row_key.value)
