import datetime
from typing import Optional

EntryId = int
OptionalDate = Optional[datetime.date]
OptionalStr = Optional[str]
