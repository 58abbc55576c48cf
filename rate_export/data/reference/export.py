"""
Output Configuration

Location and presentation of the exported workbook.
"""

FILE_NAME = "uploads/Whitebox-Export.xlsx"

DEFAULT_COLUMN_WIDTH = 15     # Applied to every column of every sheet
