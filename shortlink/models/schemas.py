from typing import Literal

from pydantic import BaseModel


class LinkCreate(BaseModel):
    url: str


class Link(BaseModel):
    code: str
    url: str


class DeleteResult(BaseModel):
    code: str
    deleted: bool


class ErrorDetail(BaseModel):
    kind: str
    message: str


class LinkResponse(BaseModel):
    status: Literal["ok"] = "ok"
    data: Link


class DeleteResponse(BaseModel):
    status: Literal["ok"] = "ok"
    data: DeleteResult


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error: ErrorDetail
