from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class InquiryRequest:
    name: str = ""
    email: str = ""
    description: str = ""
    inquiry_date: str = field(default_factory=lambda: datetime.now().isoformat())
