"""Verification endpoints: JSON (base64 content) and multipart upload."""

from __future__ import annotations

import base64
import binascii
import json

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError

from xc3_verifier.api.dependencies import get_settings, get_verification_pipeline
from xc3_verifier.config.settings import Settings
from xc3_verifier.exceptions import InsufficientInputError
from xc3_verifier.models.domain import DocumentInput, ProjectMetadata
from xc3_verifier.models.schemas import ProjectPayload, VerifyRequest, VerifyResponse
from xc3_verifier.observability.logger import get_logger
from xc3_verifier.pipeline.verification_pipeline import VerificationPipeline

logger = get_logger("routes_verify")

router = APIRouter()

NO_DOCUMENTS_MESSAGE = "Please upload at least one supporting document"


def _check_document_count(count: int, settings: Settings) -> None:
    if count > settings.max_documents:
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_documents} documents per request",
        )


async def _run(
    pipeline: VerificationPipeline,
    metadata: ProjectMetadata,
    documents: list[DocumentInput],
) -> VerifyResponse:
    try:
        outcome = await pipeline.run(metadata, documents)
    except InsufficientInputError:
        raise HTTPException(
            status_code=422,
            detail=NO_DOCUMENTS_MESSAGE,
        )
    return VerifyResponse.from_outcome(outcome)


@router.post("/verify", response_model=VerifyResponse)
async def verify(
    request: VerifyRequest,
    pipeline: VerificationPipeline = Depends(get_verification_pipeline),
    settings: Settings = Depends(get_settings),
) -> VerifyResponse:
    _check_document_count(len(request.documents), settings)

    documents: list[DocumentInput] = []
    for doc in request.documents:
        try:
            raw = base64.b64decode(doc.content, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(
                status_code=400,
                detail=f"Document '{doc.file_name}' content is not valid base64",
            )
        documents.append(
            DocumentInput(file_name=doc.file_name, declared_mime_type=doc.mime_type, raw_bytes=raw)
        )

    return await _run(pipeline, request.project.to_domain(), documents)


@router.post("/verify/upload", response_model=VerifyResponse)
async def verify_upload(
    project: str = Form(...),
    files: list[UploadFile] | None = File(None),
    pipeline: VerificationPipeline = Depends(get_verification_pipeline),
    settings: Settings = Depends(get_settings),
) -> VerifyResponse:
    try:
        payload = ProjectPayload.model_validate(json.loads(project))
    except (json.JSONDecodeError, ValidationError):
        raise HTTPException(status_code=400, detail="Invalid project JSON")

    uploads = files or []
    _check_document_count(len(uploads), settings)

    documents = [
        DocumentInput(
            file_name=upload.filename or f"document-{i}",
            declared_mime_type=upload.content_type or "application/octet-stream",
            raw_bytes=await upload.read(),
        )
        for i, upload in enumerate(uploads, start=1)
    ]
    logger.info("upload_received", documents=len(documents))

    return await _run(pipeline, payload.to_domain(), documents)
