"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEES_TABLE = "personel_employees"
DEPOSITS_TABLE = "deposits"

TEMPLATE_INDEX_KEY = "excelTemplates"
TEMPLATE_RECORD_PREFIX = "excelTemplate:"

DEFAULT_BANNER_TIMEOUT_MS = 3000

EXPORT_SHEET_TITLE = "Performans Raporu"
EXPORT_FILENAME_PREFIX = "Performans_Raporu"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
