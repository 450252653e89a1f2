from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict


class ContactPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    message: str


@dataclass(frozen=True)
class DispatchResult:
    success: bool
    message: str
    status_code: int

    def body(self) -> dict:
        return {"success": self.success, "message": self.message}
