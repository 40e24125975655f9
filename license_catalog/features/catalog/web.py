from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from license_catalog.features.catalog.errors import CatalogLoadError
from license_catalog.features.catalog.service import CatalogService

router = APIRouter(prefix="/licenses", tags=["catalog-ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


@router.get("", response_class=HTMLResponse)
async def licenses_page(request: Request, lang: str | None = None) -> HTMLResponse:
    cfg = request.app.state.cfg
    language = lang or cfg.language
    try:
        cards = await CatalogService(provider=cfg.provider(), language=cfg.language).list_cards(language=language)
    except CatalogLoadError as e:
        return templates.TemplateResponse(
            request,
            "catalog/licenses.html",
            {
                "title": "Licenses",
                "language": language,
                "cards": [],
                "error": str(e),
            },
            status_code=502,
        )

    return templates.TemplateResponse(
        request,
        "catalog/licenses.html",
        {
            "title": "Licenses",
            "language": language,
            "cards": cards,
            "error": None,
        },
    )
