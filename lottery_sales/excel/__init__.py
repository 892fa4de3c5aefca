"""Excel styling, layout and writing utilities."""
from .formatters import format_header_row, format_data_cell, set_column_widths, auto_column_width
from .grid import CellStyle, GridBuilder
from .writer import ExcelWriter
