"""Console writer with ANSI colors and rich tables"""

import sys
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from egon_log.formatters.ansi_style import render_value


class ConsoleWriter:
    """
    Write logs to console with optional colors.

    ``error`` and ``warn`` go to the error stream, everything else to the
    output stream. Each call writes one line made of its values rendered
    one by one and joined by spaces.
    """

    INDEX_HEADER = "(index)"
    VALUES_HEADER = "Values"

    def __init__(self, colored: bool = True, stream=None, error_stream=None):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stdout)
            error_stream: Stream for errors and warnings (default: sys.stderr)
        """
        self.colored = colored
        self.stream = stream or sys.stdout
        self.error_stream = error_stream or sys.stderr

    def _write(self, stream, values: Iterable[Any]) -> None:
        msg = " ".join(render_value(v, self.colored) for v in values)
        stream.write(msg + "\n")
        stream.flush()

    def error(self, *values: Any) -> None:
        """Write to the error stream."""
        self._write(self.error_stream, values)

    def warn(self, *values: Any) -> None:
        """Write to the error stream."""
        self._write(self.error_stream, values)

    def info(self, *values: Any) -> None:
        self._write(self.stream, values)

    def debug(self, *values: Any) -> None:
        self._write(self.stream, values)

    def log(self, *values: Any) -> None:
        self._write(self.stream, values)

    def table(
        self,
        data: Any = None,
        columns: Optional[Iterable[Any]] = None,
        *_ignored: Any,
    ) -> None:
        """
        Render tabular data.

        Mappings are keyed by their keys, other collections by position.
        Rows that are mappings or sequences spread over one column per key;
        scalar rows land in a ``Values`` column. Data that is not a
        collection is written like ``log``.

        Nothing is written without data; arguments after ``columns`` are
        ignored.

        Args:
            data: Mapping or sequence of rows
            columns: Restrict and order the columns shown
        """
        if data is None:
            return

        if isinstance(data, (str, bytes)) or not isinstance(data, (Mapping, list, tuple, set, frozenset)):
            self.log(data)
            return

        if isinstance(data, Mapping):
            rows = list(data.items())
        else:
            rows = list(enumerate(data))

        keys: List[Any] = list(columns) if columns is not None else []
        has_values = False
        for _, row in rows:
            if isinstance(row, Mapping):
                row_keys = list(row.keys())
            elif isinstance(row, (list, tuple)):
                row_keys = list(range(len(row)))
            else:
                has_values = True
                continue
            if columns is None:
                keys.extend(k for k in row_keys if k not in keys)

        table = Table()
        table.add_column(Text(self.INDEX_HEADER), overflow="fold")
        for key in keys:
            table.add_column(Text(str(key)), overflow="fold")
        if has_values:
            table.add_column(Text(self.VALUES_HEADER), overflow="fold")

        for index, row in rows:
            cells = [Text(str(index))]
            cells.extend(Text(self._cell(row, key)) for key in keys)
            if has_values:
                is_scalar = not isinstance(row, (Mapping, list, tuple))
                cells.append(Text(render_value(row, False) if is_scalar else ""))
            table.add_row(*cells)

        console = Console(file=self.stream, no_color=not self.colored, highlight=False)
        # Non-terminal streams default to 80 columns; widen to the table's natural width
        width = console.measure(table).maximum
        if width > console.width:
            console = Console(
                file=self.stream, no_color=not self.colored, highlight=False, width=width
            )
        console.print(table)
        self.stream.flush()

    @staticmethod
    def _cell(row: Any, key: Any) -> str:
        if isinstance(row, Mapping):
            return render_value(row[key], False) if key in row else ""
        if isinstance(row, (list, tuple)) and isinstance(key, int) and 0 <= key < len(row):
            return render_value(row[key], False)
        return ""

    def flush(self):
        """Flush streams."""
        self.stream.flush()
        self.error_stream.flush()
