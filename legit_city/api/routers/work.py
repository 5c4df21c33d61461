# This file defines the work upload (multipart) and work listing endpoints.
# It exists so admin artifacts and their metadata arrive through one form post.
# Form fields are validated as one request model so errors match the JSON endpoints.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError

from legit_city.api.dependencies import get_work_service
from legit_city.api.error_handlers import InvalidRequestError
from legit_city.api.schemas.common import MessageResponse
from legit_city.api.schemas.work_schemas import WorkListResponse, WorkUploadForm
from legit_city.api.services.work_service import WorkService

router = APIRouter(prefix="/api/work", tags=["work"])
WorkServiceDep = Annotated[WorkService, Depends(get_work_service)]


@router.post("", response_model=MessageResponse)
def upload_work(
    service: WorkServiceDep,
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    admin_id: str | None = Form(default=None, alias="adminId"),
    file: UploadFile | None = File(default=None),
) -> dict[str, object]:
    try:
        form = WorkUploadForm.model_validate(
            {"title": title, "description": description, "adminId": admin_id}
        )
    except ValidationError as exc:
        raise InvalidRequestError(
            "title, description and adminId required",
            details=[
                {
                    "field": ".".join(str(part) for part in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ],
        ) from exc

    if file is not None and file.filename:
        service.upload_work(form, file_name=file.filename, stream=file.file)
    else:
        service.upload_work(form)
    return {"success": True, "message": "Work uploaded"}


@router.get("", response_model=WorkListResponse)
def list_work(service: WorkServiceDep) -> dict[str, object]:
    return {"work": service.list_work()}
