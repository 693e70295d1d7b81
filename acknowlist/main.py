import logging

from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import AcknowledgementsResponse, HealthResponse
from .parser import AcknowPodParser
from .rules import ACCEPTED_SUFFIX, max_upload_bytes

logger = logging.getLogger(__name__)

app = FastAPI(
    title="acknowlist",
    description="Parse CocoaPods acknowledgements plists into license records",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/acknowledgements", response_model=AcknowledgementsResponse)
async def parse_acknowledgements(
    file: UploadFile = File(...),
    drop_default_text: bool = False,
    exclude_by_equality: bool = False,
):
    if not (file.filename or "").lower().endswith(ACCEPTED_SUFFIX):
        raise HTTPException(status_code=422, detail="Only .plist files are supported")

    limit = max_upload_bytes()
    raw = await file.read(limit + 1)
    if len(raw) > limit:
        raise HTTPException(status_code=413, detail=f"File exceeds {limit} bytes")

    parser = AcknowPodParser.from_bytes(raw, exclude_by_equality=exclude_by_equality)
    header_footer, acknowledgements = parser.parse()
    if drop_default_text:
        header_footer = header_footer.without_defaults()

    logger.info("Parsed %s: %d acknowledgements", file.filename, len(acknowledgements))
    return AcknowledgementsResponse(
        header=header_footer.header,
        footer=header_footer.footer,
        acknowledgements=acknowledgements,
        count=len(acknowledgements),
    )
