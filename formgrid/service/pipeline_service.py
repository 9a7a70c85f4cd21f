from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import requests

from formgrid.domain.errors import DocumentDecodeError, DocumentFetchError
from formgrid.domain.ports.Pipeline_interface import Pipeline_interface
from formgrid.domain.ports.Settings_provider import Settings_provider
from formgrid.domain.schemas.input_data import InputData
from formgrid.domain.schemas.result_data import MetaInfo, ResultData
from formgrid.lib.logger import get_logger
from formgrid.lib.settings import EnvSettings

from .decode_pdf_service import PdfDecodeService
from .decode_service import DecodeService
from .field_extractor_service import FieldExtractorService
from .layout_registry_service import LayoutRegistryService


class PipelineService(Pipeline_interface):
    def __init__(
        self,
        settings: Optional[Settings_provider] = None,
        layouts: Optional[LayoutRegistryService] = None,
    ) -> None:
        self.logger = get_logger("pipeline")
        self.settings = settings or EnvSettings()
        extra = self.settings.get("LAYOUTS_DIR")
        self.layouts = layouts or LayoutRegistryService([Path(extra)] if extra else None)
        self.decoder = DecodeService(
            pdf=PdfDecodeService(
                tolerance=self.settings.get_float("LINE_TOLERANCE", 1.0),
                min_length=self.settings.get_float("MIN_LINE_LENGTH", 3.0),
            )
        )
        self.extractor = FieldExtractorService()

    def run(self, input_data: InputData) -> ResultData:
        t0 = time.perf_counter()
        options = input_data.options
        meta = MetaInfo(request_id=input_data.context.request_id or None, timings_ms={})

        layout_name = options.layout or self.settings.get("DEFAULT_LAYOUT", "k1-2024")
        layout = self.layouts.get(layout_name)
        min_fields = options.min_fields or self.settings.get_int("MIN_FIELDS")
        max_pages = options.max_pages or self.settings.get_int("MAX_PAGES")
        self.logger.info("start pipeline: layout=%s min_fields=%s", layout.name, min_fields or layout.min_fields)

        # 1) Decode
        data, filename, content_type = self._load_bytes(input_data)
        document = self.decoder.run(
            data,
            filename=filename,
            content_type=content_type,
            source_type=options.source_type,
            max_pages=max_pages,
        )
        meta.source = document.source
        meta.timings_ms["decode"] = int((time.perf_counter() - t0) * 1000)
        self.logger.info("decode: source=%s pages=%d", document.source, len(document.pages))

        # 2) Extract; NoValidPageError propagates to the transport
        t1 = time.perf_counter()
        page_num, result, attempts = self.extractor.extract(document, layout, min_fields=min_fields)
        meta.timings_ms["extract"] = int((time.perf_counter() - t1) * 1000)

        total_ms = int((time.perf_counter() - t0) * 1000)
        meta.timings_ms["total"] = total_ms
        self.logger.info("done: page=%d fields=%d total=%d ms", page_num, result.field_count, total_ms)

        return ResultData(meta=meta, layout=layout.name, page=page_num, result=result, attempts=attempts)

    # ------------- helpers -------------
    def _load_bytes(self, input_data: InputData) -> tuple[bytes, Optional[str], Optional[str]]:
        document = input_data.document
        if document.data is not None:
            return document.data, document.filename, document.content_type
        if document.url:
            try:
                resp = requests.get(str(document.url), timeout=15)
                resp.raise_for_status()
            except requests.RequestException as e:
                raise DocumentFetchError(f"failed to download document: {e}") from e
            ct = resp.headers.get("Content-Type")
            return resp.content, document.filename, document.content_type or ct
        raise DocumentDecodeError("no document data provided")
