from __future__ import annotations

import json
import mimetypes
import sys
from pathlib import Path

from formgrid.domain.errors import ExtractionError, NoValidPageError
from formgrid.domain.schemas.input_data import DocumentPayload, InputData, ProcessingOptions
from formgrid.lib.settings import EnvSettings
from formgrid.service.pipeline_service import PipelineService

from dotenv import load_dotenv
load_dotenv()

USAGE = "Usage: python main.py <file.pdf|file.json>  # or set SERVE=1 to start HTTP server"


def build_input_from_file(path: Path, settings: EnvSettings) -> InputData:
    data = path.read_bytes()
    mime, _ = mimetypes.guess_type(str(path))
    options = ProcessingOptions(
        layout=settings.get("DEFAULT_LAYOUT"),
        max_pages=settings.get_int("MAX_PAGES"),
    )
    payload = DocumentPayload(data=data, filename=path.name, content_type=mime, size_bytes=len(data))
    return InputData(document=payload, options=options)


def main() -> None:
    settings = EnvSettings()
    if settings.get_bool("SERVE") and len(sys.argv) <= 1:
        # Run HTTP server; host/port from env
        import uvicorn
        host = settings.get("DOMAIN", "0.0.0.0")
        port = settings.get_int("PORT", 8080)
        uvicorn.run("formgrid.transport.http.server:app", host=host, port=port, reload=False)
        return

    # CLI mode: first arg is file path
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    if path is None or not path.is_file():
        if path is not None:
            print(f"File not found: {path}", flush=True)
        print(USAGE, flush=True)
        sys.exit(2)

    input_data = build_input_from_file(path, settings)
    pipeline = PipelineService(settings=settings)
    try:
        result = pipeline.run(input_data)
    except NoValidPageError as e:
        diag = {
            "error": str(e),
            "result": e.result.model_dump() if e.result is not None else None,
            "attempts": [a.model_dump() for a in e.attempts],
        }
        print(json.dumps(diag, ensure_ascii=False, indent=2), flush=True)
        sys.exit(1)
    except ExtractionError as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False), flush=True)
        sys.exit(1)

    print(result.model_dump_json(indent=2), flush=True)


if __name__ == "__main__":
    main()
