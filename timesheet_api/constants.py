# api
API_PREFIX = "/api/timesheets"

# entry constraints
# ids are stored as 64-bit signed integers
MAX_ENTRY_ID = 2**63 - 1
MIN_HOURS = 0
MAX_HOURS = 24
NOTES_MAX_LENGTH = 500
NAME_MAX_LENGTH = 255

# formatting
DATE_FORMATS = ["%Y-%m-%d"]
ROW_HEADER = f"{'ID': <6}\t{'Date': <10}\t{'Hours': <5}\t{'Employee': <20}\t{'Project': <20}\tNotes"
