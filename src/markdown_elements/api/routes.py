"""API routes: parse text or stored uploads into block elements."""

from __future__ import annotations

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from .. import config
from ..models import DocumentElementsResponse, ParseRequest, ParseResponse, UploadResponse
from ..services.ids import make_id_factory
from ..services.input_layer import decode_content, get_upload, save_upload
from ..services.markdown_parser import parse_markdown_elements

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _check_size(text: str) -> None:
    if len(text) > config.MAX_INPUT_CHARS:
        logger.warning("Rejected input of %d chars (limit %d)", len(text), config.MAX_INPUT_CHARS)
        raise HTTPException(400, f"Input exceeds {config.MAX_INPUT_CHARS} characters")


@router.post("/parse", response_model=ParseResponse)
async def api_parse(body: ParseRequest):
    """Parse Markdown text. Returns elements in source order."""
    _check_size(body.text)
    try:
        ids = make_id_factory(body.id_strategy)
    except ValueError as e:
        raise HTTPException(400, str(e))
    elements = parse_markdown_elements(body.text, ids)
    return ParseResponse(elements=elements, total=len(elements))


@router.post("/upload", response_model=UploadResponse)
async def api_upload(file: UploadFile = File(...)):
    """Upload a Markdown file. Returns file_id, preview_markdown and element count."""
    if not file.filename or not (file.filename.endswith(".md") or file.filename.endswith(".txt")):
        logger.info("Rejected upload %r: not .md/.txt", file.filename)
        raise HTTPException(400, "File must be .md or .txt")
    text = decode_content(await file.read())
    _check_size(text)
    result = save_upload(text, file.filename)
    total = len(parse_markdown_elements(text))
    return UploadResponse(**result, total=total)


@router.get("/documents/{file_id}/elements", response_model=DocumentElementsResponse)
async def api_document_elements(file_id: str, id_strategy: str | None = None):
    """Parse a previously uploaded document."""
    upload = get_upload(file_id) if file_id.isalnum() else None
    if not upload:
        raise HTTPException(404, "Document not found")
    try:
        ids = make_id_factory(id_strategy)
    except ValueError as e:
        raise HTTPException(400, str(e))
    elements = parse_markdown_elements(upload.get("content", ""), ids)
    return DocumentElementsResponse(
        file_id=file_id,
        filename=upload.get("filename", "README.md"),
        elements=elements,
        total=len(elements),
    )
