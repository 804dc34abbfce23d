"""HTTP API for vowel word extraction."""

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from config import config
from exceptions import AccessDeniedError, MissingFileError, ReadError, create_error_response
from services.runner_service import RunnerService
from utils.utils import extract_unique_vowel_words

logger = logging.getLogger(__name__)

# Initialize services
runner_service = RunnerService()

app = FastAPI(
    title="Vowel Words API",
    description="API for extracting unique all-vowel words from text",
    version="1.0.0"
)


class ExtractRequest(BaseModel):
    """Request model for extraction from raw text."""
    text: str


class ExtractResponse(BaseModel):
    """Response model for extraction from raw text."""
    words: List[str]
    count: int


class ProcessRequest(BaseModel):
    """Request model for extraction from a file."""
    path: str


class ProcessResponse(BaseModel):
    """Response model for extraction from a file."""
    path: str
    content: str
    words: List[str]


@app.post("/extract", response_model=ExtractResponse)
async def extract_words(request: ExtractRequest):
    """Extract vowel words from the posted text."""
    words = extract_unique_vowel_words(request.text)
    return ExtractResponse(words=words, count=len(words))


@app.post("/process", response_model=ProcessResponse)
async def process_file(request: ProcessRequest):
    """Read a file from the data directory and extract its vowel words.

    Args:
        request: Request with the path of the input file.

    Returns:
        File content and the vowel words found in it.
    """
    try:
        if not request.path or not request.path.strip():
            raise HTTPException(status_code=400, detail="Path cannot be empty")

        path = config.resolve_data_path(request.path)
        return ProcessResponse(**runner_service.process_file(str(path)))

    except HTTPException:
        raise
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=create_error_response(e))
    except MissingFileError as e:
        raise HTTPException(status_code=404, detail=create_error_response(e))
    except ReadError as e:
        raise HTTPException(status_code=422, detail=create_error_response(e))
    except Exception as e:
        logger.exception("Processing %s failed", request.path)
        raise HTTPException(status_code=500, detail=create_error_response(e))


@app.get("/health")
async def health_check():
    """Check API health and report non-secret configuration."""
    return {
        "status": "healthy",
        "config": {
            "encoding": config.reader.encoding,
            "input_path": str(config.reader.input_path),
            "data_dir": str(config.reader.data_dir),
            "input_exists": config.validate_input_file()
        }
    }


if __name__ == "__main__":
    import uvicorn

    config.setup_environment()
    uvicorn.run(
        "app:app",
        host=config.api.host,
        port=config.api.port,
        workers=config.api.workers
    )
