from __future__ import annotations

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from imgdrop_core.errors import FileTooLargeError, NoFileError
from imgdrop_core.pipelines import ingest_upload

from imgdrop_daemon.http.schemas import UPLOAD_MESSAGES, ErrorResponse, UploadResponse


def build_api_router() -> APIRouter:
    router = APIRouter()

    @router.post(
        "/upload",
        response_model=UploadResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def upload(request: Request, file: UploadFile | None = File(default=None)) -> UploadResponse:
        ctx = request.app.state.ctx
        if file is None:
            raise NoFileError()

        limit = ctx.settings.max_upload_bytes
        data = await file.read(limit + 1)
        await file.close()
        if len(data) > limit:
            raise FileTooLargeError(limit)

        result = await run_in_threadpool(
            ingest_upload,
            content=data,
            filename=file.filename,
            blob_store=ctx.blob_store,
            options=ctx.ingest_options,
        )
        return UploadResponse(message=UPLOAD_MESSAGES[result.outcome], file=result.key)

    return router
