"""Result types returned by SEI Mate actions.

Every action call produces either ``Ok`` (a response for the user) or ``Err``
(a tagged failure). Both expose ``.text``, so a chat surface can deliver
either without inspecting which one it got.
"""
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ErrorKind = Literal["invalid_format", "handler_error", "no_match"]


class ActionResponse(BaseModel):
    """Free text for the user plus a structured payload."""
    model_config = ConfigDict(frozen=True)

    text: str
    content: Dict[str, Any] = Field(default_factory=dict)


class Ok(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    action: str
    response: ActionResponse

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.response.text

    @property
    def content(self) -> Dict[str, Any]:
        return self.response.content


class Err(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    action: str
    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return self.message

    @property
    def content(self) -> Dict[str, Any]:
        return {"error": self.kind, "message": self.message}


ActionResult = Union[Ok, Err]
