"""FastAPI web app serving the Savanna Tale page and on-demand renders."""

import math
from io import BytesIO
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from savanna_tale.animation_pipeline import encode_animation
from savanna_tale.config import RenderSettings
from savanna_tale.constants import TOTAL_DURATION
from savanna_tale.output import media_type_for_output_format, output_path_for_format
from savanna_tale.story.raster_animation import render_still
from savanna_tale.story.scenes import SCENES, resolve_scene

load_dotenv()

TITLE = "Savanna Tale"
DESCRIPTION = (
    "An animated micro-short that traces a playful encounter spiraling into a stark finale."
)
CANVAS_LABEL = "Animated lion and monkey scene"

app = FastAPI(title=TITLE)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Serve the page shell."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": TITLE,
            "description": DESCRIPTION,
            "canvas_label": CANVAS_LABEL,
            "scenes": SCENES,
            "opening_scene": SCENES[0],
            "loop_seconds": TOTAL_DURATION,
        },
    )


@app.get("/api/render")
def render(
    output_format: str = Query("gif", alias="format", description="Output format: gif, webp or png"),
    fps: int = Query(20, ge=1, le=60, description="Frames per second"),
    scale: float = Query(0.5, gt=0, le=2, description="Output pixels per logical unit"),
    captions: bool = Query(False, description="Burn scene captions into frames"),
    start: float = Query(0.0, ge=0, description="Seconds into the story shown by the first frame"),
):
    """Render one full story loop."""
    _require_finite("start", start)
    try:
        output_path = output_path_for_format(output_format)
        media_type = media_type_for_output_format(output_format)
        settings = RenderSettings.from_env().with_overrides(fps=fps, scale=scale, captions=captions)
        encoded = encode_animation(output_path, settings, start_at=start)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to render animation: {e}")

    return Response(
        content=encoded,
        media_type=media_type,
        headers={"Content-Disposition": f"inline; filename=savanna-tale.{output_format.lower()}"},
    )


@app.get("/api/frame")
def frame(
    elapsed: float = Query(..., ge=0, description="Seconds into the story"),
    scale: float = Query(1.0, gt=0, le=2),
    captions: bool = Query(True),
):
    """Render a single PNG still."""
    _require_finite("elapsed", elapsed)
    try:
        settings = RenderSettings.from_env().with_overrides(scale=scale, captions=captions)
        image = render_still(elapsed, settings)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return Response(content=buffer.getvalue(), media_type="image/png")


@app.get("/api/scene")
async def scene(elapsed: float = Query(..., ge=0, description="Seconds into the story")):
    """Report the scene active at a point in the story."""
    _require_finite("elapsed", elapsed)
    active = resolve_scene(elapsed % TOTAL_DURATION)
    return {
        "id": active.id,
        "label": active.label,
        "description": active.description,
        "start": active.start,
        "end": active.end,
    }


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise HTTPException(status_code=400, detail=f"{name} must be a finite number of seconds")
