from __future__ import annotations

import mimetypes
import os
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import AnyHttpUrl

from formgrid.domain.errors import DocumentDecodeError, NoValidPageError, UnknownLayoutError
from formgrid.domain.schemas.input_data import DocumentPayload, InputData, ProcessingOptions
from formgrid.domain.schemas.result_data import ResultData
from formgrid.domain.schemas.source_type import Source_type
from formgrid.lib.logger import get_logger
from formgrid.service.pipeline_service import PipelineService


router = APIRouter()


def _guess_mime(filename: Optional[str]) -> Optional[str]:
    if not filename:
        return None
    mime, _ = mimetypes.guess_type(filename)
    return mime


@router.post("/extract", summary="Extract form fields from an uploaded PDF or pdf2json file", response_model=ResultData)
async def extract(
    request: Request,
    file: Optional[UploadFile] = File(default=None, description="PDF or pdf2json JSON to process"),
    url: Optional[AnyHttpUrl] = Query(default=None, description="Public URL of the document"),
    layout: Optional[str] = Query(default=None, description="Layout name, defaults to DEFAULT_LAYOUT"),
    source_type: Optional[Source_type] = Query(default=None, description="Force the decoder"),
    min_fields: Optional[int] = Query(default=None, ge=1, description="Populated regions needed per page"),
    max_pages: Optional[int] = Query(default=None, ge=1, description="Max pages to try"),
):
    if not file and not url:
        raise HTTPException(status_code=400, detail="either file or url must be provided")

    if file is not None:
        content = await file.read()
        payload = DocumentPayload(
            data=content,
            filename=file.filename,
            content_type=file.content_type or _guess_mime(file.filename),
            size_bytes=len(content),
        )
    else:
        payload = DocumentPayload(url=str(url), filename=os.path.basename(str(url)) or None)

    options = ProcessingOptions(
        source_type=source_type,
        layout=layout,
        min_fields=min_fields,
        max_pages=max_pages,
    )
    input_data = InputData(document=payload, options=options)

    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        pipeline = PipelineService()
    try:
        return pipeline.run(input_data)
    except NoValidPageError as e:
        # the last rejected page is returned for debugging
        return JSONResponse(
            status_code=422,
            content={
                "error": str(e),
                "result": e.result.model_dump() if e.result is not None else None,
                "attempts": [a.model_dump() for a in e.attempts],
            },
        )
    except (DocumentDecodeError, UnknownLayoutError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        get_logger("http").exception("extraction failed")
        raise HTTPException(status_code=500, detail=f"processing failed: {e}") from e
