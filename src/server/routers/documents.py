"""Document persistence endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from server.dependencies import get_document_store
from server.models import DocumentImportRequest, DocumentListResponse, DocumentSaveRequest, ErrorResponse
from wireframe2svg.export import build_saved_file
from wireframe2svg.schemas import StoredDocument
from wireframe2svg.storage import CURRENT_DOC_ID, DocumentStore
from wireframe2svg.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/documents")

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Document not found"}}


@router.get("")
async def list_documents(store: DocumentStore = Depends(get_document_store)) -> DocumentListResponse:
    documents = await store.list_documents()
    return DocumentListResponse(current_id=await store.get_current_id(), documents=documents)


@router.post("/import")
async def import_document(
    request: DocumentImportRequest,
    store: DocumentStore = Depends(get_document_store),
) -> StoredDocument:
    """Store the contents of a loaded ``.txt`` file and make it the current document."""
    return await store.import_text(request.content, request.filename)


@router.put("/{doc_id}")
async def save_document(
    doc_id: str,
    request: DocumentSaveRequest,
    store: DocumentStore = Depends(get_document_store),
) -> StoredDocument:
    document = await store.save(doc_id, request.content, name=request.name)
    logger.info("Document saved", extra={"doc_id": doc_id, "chars": len(request.content)})
    return document


@router.get("/{doc_id}", responses=_NOT_FOUND)
async def get_document(doc_id: str, store: DocumentStore = Depends(get_document_store)) -> StoredDocument:
    return await store.get(doc_id)


@router.delete("/{doc_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_document(doc_id: str, store: DocumentStore = Depends(get_document_store)) -> Response:
    await store.delete(doc_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{doc_id}/current", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def select_document(doc_id: str, store: DocumentStore = Depends(get_document_store)) -> Response:
    """Switch the current document. The document must exist unless it is the scratch ``current`` one."""
    if doc_id != CURRENT_DOC_ID:
        await store.get(doc_id)
    await store.set_current_id(doc_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{doc_id}/download", responses=_NOT_FOUND)
async def download_document(doc_id: str, store: DocumentStore = Depends(get_document_store)) -> Response:
    """Download a document as a ``.txt`` file named after its title."""
    saved = build_saved_file(await store.load(doc_id))
    return Response(
        content=saved.content,
        media_type=saved.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{saved.filename}"'},
    )
