"""
Server-rendered pages.

``GET /`` answers with a plain-text liveness message and ``GET /posts``
renders every stored post as a simple HTML page.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from social_media_api.app.api.deps import get_post_service
from social_media_api.app.services.post_service import PostService


TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Social Media Platform API is running!"


@router.get("/posts", response_class=HTMLResponse)
async def posts_page(request: Request, service: PostService = Depends(get_post_service)) -> HTMLResponse:
    posts = await service.all_posts()
    return templates.TemplateResponse(request, "posts.html", {"posts": posts})
