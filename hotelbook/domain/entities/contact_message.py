from dataclasses import dataclass


@dataclass(frozen=True)
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str
