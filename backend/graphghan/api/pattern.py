"""
API routes for pattern generation and export.
"""

from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from graphghan.engine.calendar_normalizer import parse_daily_counts
from graphghan.engine.export_synthesizer import (
    compute_measurements,
    export_filename,
    export_pattern,
)
from graphghan.engine.pdf_export import render_pattern_pdf
from graphghan.engine.themes import resolve_theme_id
from graphghan.engine.year_stacker import build_pattern
from graphghan.models.pattern import (
    ExportRequest,
    Pattern,
    PatternRequest,
    PatternResponse,
    YearGridOutput,
)

router = APIRouter(prefix="/api/v1", tags=["pattern"])


def _build(body: PatternRequest) -> Pattern:
    counts_by_year = {
        year: parse_daily_counts(raw) for year, raw in body.contributions.items()
    }
    return build_pattern(body.years, counts_by_year)


def _attachment(filename: str) -> str:
    """Content-Disposition value that survives non-Latin-1 filenames (RFC 6266)."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.post("/pattern", response_model=PatternResponse)
async def create_pattern(body: PatternRequest) -> PatternResponse:
    """
    Compose the stacked year grids for the requested years.

    Years come back newest first no matter how they were requested.
    """
    try:
        pattern = _build(body)
        return PatternResponse(
            username=body.username,
            years=list(pattern.years),
            total_count=pattern.total_count,
            theme=resolve_theme_id(body.theme).value,
            year_grids=[
                YearGridOutput(
                    year=g.year,
                    total_count=g.total_count,
                    rows=g.rows,
                    cols=g.cols,
                    levels=g.to_rows(),
                )
                for g in pattern.year_grids
            ],
            measurements=compute_measurements(pattern),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Pattern error: {str(e)}")


@router.post("/pattern/export")
async def export_pattern_text(body: ExportRequest) -> Response:
    """Download the full plain-text instructions document."""
    try:
        export = export_pattern(_build(body), body.username, body.theme)
        return Response(
            content=export.content,
            media_type="text/plain; charset=utf-8",
            headers={"Content-Disposition": _attachment(export.filename)},
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/pattern/pdf")
async def export_pattern_pdf(body: ExportRequest) -> Response:
    """Download a printable color chart as PDF."""
    try:
        pattern = _build(body)
        pdf_bytes = render_pattern_pdf(pattern, body.username, body.theme)
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={
                "Content-Disposition": _attachment(
                    export_filename(body.username, pattern, extension="pdf")
                ),
            },
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
